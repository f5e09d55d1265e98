"""
Filmorate - Backend REST d'un catalogue de films social.

Ce package gere les films (classification MPA, genres), les utilisateurs,
les likes et les relations d'amitie, et calcule le classement des films populaires.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs, validateurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Stockage (SQLModel ou memoire)
- web/ : API HTTP JSON (FastAPI)
"""
