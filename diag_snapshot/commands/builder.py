"""Constructeur fluent du préfixe d'exécution distante.

Ce module fournit la classe RemoteShellBuilder qui assemble la ligne
de commande enveloppant une commande shell pour l'exécuter sur un
hôte distant (ssh par défaut).

Example:
    Construction d'un appel ssh non interactif :

        from diag_snapshot.commands import RemoteShellBuilder

        argv = (
            RemoteShellBuilder("ssh")
            .with_option("-o", "BatchMode=yes")
            .with_option("-o", "ConnectTimeout=10")
            .with_flag("-T")
            .wrap("df -h", "web01")
        )
        # Résultat : ["ssh", "-o", "BatchMode=yes",
        #             "-o", "ConnectTimeout=10", "-T",
        #             "web01", "df -h"]
"""

from typing import List, Sequence

DEFAULT_REMOTE_SHELL = ("ssh", "-o", "BatchMode=yes")


class RemoteShellBuilder:
    """Constructeur fluent du préfixe shell distant."""

    def __init__(self, program: str = "ssh") -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du client shell distant.

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme shell distant est requis.")
        self._program: str = program
        self._options: List[str] = []

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "RemoteShellBuilder":
        """Crée un constructeur depuis un préfixe complet.

        Args:
            argv: Préfixe (ex: ["ssh", "-o", "BatchMode=yes"]).

        Returns:
            Constructeur pré-rempli.

        Raises:
            ValueError: Si argv est vide.
        """
        if not argv:
            raise ValueError("Le préfixe shell distant est vide.")
        return cls(argv[0]).with_options(list(argv[1:]))

    def with_options(
        self, options: List[str]
    ) -> "RemoteShellBuilder":
        """Ajoute une liste d'options brutes.

        Args:
            options: Liste d'options (ex: ['-p', '2222']).

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.extend(options)
        return self

    def with_flag(self, flag: str) -> "RemoteShellBuilder":
        """Ajoute un flag simple (ex: '-T').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(flag)
        return self

    def with_option(
        self, key: str, value: str
    ) -> "RemoteShellBuilder":
        """Ajoute une option suivie de sa valeur en argument séparé.

        Args:
            key: Option (ex: '-o').
            value: Valeur (ex: 'BatchMode=yes').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.extend([key, value])
        return self

    def prefix(self) -> List[str]:
        """Retourne le préfixe sans hôte ni commande."""
        return [self._program] + self._options

    def wrap(self, command: str, hostname: str) -> List[str]:
        """Enveloppe une commande pour l'exécuter sur un hôte.

        La commande est transmise comme un seul argument : c'est le
        shell distant qui l'interprète.

        Args:
            command: Ligne de commande shell.
            hostname: Hôte cible.

        Returns:
            Liste d'arguments prête pour subprocess.

        Raises:
            ValueError: Si hostname est vide.
        """
        if not hostname:
            raise ValueError("Le nom d'hôte est requis.")
        return self.prefix() + [hostname, command]
