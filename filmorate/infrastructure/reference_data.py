"""
Donnees de reference pre-remplies (classifications MPA et genres).

Partagees par l'initialisation de la base et par le backend memoire.
"""

MPA_RATINGS: tuple[tuple[int, str], ...] = (
    (1, "G"),
    (2, "PG"),
    (3, "PG-13"),
    (4, "R"),
    (5, "NC-17"),
)

GENRES: tuple[tuple[int, str], ...] = (
    (1, "Comedy"),
    (2, "Drama"),
    (3, "Animation"),
    (4, "Thriller"),
    (5, "Documentary"),
    (6, "Action"),
)
