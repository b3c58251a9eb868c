from __future__ import annotations


class PWoodError(Exception):
    """Base de toutes les erreurs pwood."""


class InvalidParameterError(PWoodError, ValueError):
    """Paramètre de génération invalide (dimensions nulles, écart-type non fini, ...)."""


class UnknownProfileError(PWoodError, KeyError):
    """Preset de couleurs inconnu du registre."""


class MissingCudaError(PWoodError, RuntimeError):
    pass
