"""Limites dos validadores de entrada."""

MAX_NAME_LENGTH = 200
MAX_SUBJECT_LENGTH = 300
MAX_MESSAGE_LENGTH = 5000

# Padrão propositalmente permissivo: um "@", algo sem espaço dos dois lados e
# um "." depois do "@". Não é validação RFC.
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

SESSION_ID_PATTERN = r"^[A-Za-z0-9_]{1,255}$"
