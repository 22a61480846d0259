"""Rotas de upload de arquivos."""
