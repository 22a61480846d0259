"""Rotas do formulário de contato."""
