"""Rotas de relay para o Make."""
