"""
Couche infrastructure : implementations concretes des ports de stockage.

- persistence/ : base relationnelle via SQLModel
- memory/ : dictionnaires en memoire proteges par un verrou
"""
