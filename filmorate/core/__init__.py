"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), erreurs et validateurs.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (Film, User, Genre, Mpa)
- ports/ : Interfaces abstraites definissant les contrats pour les stores
- exceptions.py : Erreurs du domaine (NotFoundError, DuplicateError, ValidationError)
- validation.py : Validateurs explicites des entrees
"""
