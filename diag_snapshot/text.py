"""Découpage de texte en lignes, partagé par le parseur et le journal."""

from typing import List


def split_lines(text: str, strip_cr: bool = False) -> List[str]:
    """Découpe un texte sur les fins de ligne ``\\n``.

    Le fragment vide produit par un ``\\n`` terminal n'est pas une
    ligne, les lignes vides intermédiaires sont conservées. Les lignes
    sont rendues telles quelles, sauf si strip_cr demande de retirer
    le ``\\r`` final de chacune (sorties CRLF dans le journal).

    Args:
        text: Texte à découper.
        strip_cr: Retire un ``\\r`` final de chaque ligne.

    Returns:
        Liste ordonnée des lignes, vide si le texte est vide.

    Example:
        >>> split_lines("a\\n\\nb\\n")
        ['a', '', 'b']
        >>> split_lines("a\\r\\nb", strip_cr=True)
        ['a', 'b']
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    if not strip_cr:
        return lines
    return [line[:-1] if line.endswith("\r") else line for line in lines]
