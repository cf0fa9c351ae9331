"""
Module contenant les exceptions personnalisées de diag_snapshot.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""


class ApplicationError(Exception):
    """Exception de base pour toute l'application."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class ConfigIOError(ConfigurationError):
    """Fichier de configuration ou de sortie illisible/inaccessible.

    Erreur fatale : la collecte est abandonnée avant toute exécution.
    """
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Paramètre obligatoire absent ou vide (commande, texte de config)."""
    pass
