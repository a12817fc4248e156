"""
MediaTrack - Client de la bibliotheque personnelle de films et de livres.

Ce package fournit la couche d'acces aux donnees cote client : les entites
echangees avec le service distant, l'execution des requetes HTTP et les
conteneurs observables qui portent la vue courante de la bibliotheque.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (store reactif, synchronisation)
- adapters/ : Couche infrastructure (client HTTP, CLI)
"""

__version__ = "0.1.0"
