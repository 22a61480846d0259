"""Use cases: um por operação exposta pelo relay.

Cada use case recebe colaboradores e settings no construtor e levanta
RelayError; a tradução para resposta HTTP fica em api/routes.
"""
