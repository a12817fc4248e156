"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks HTTP).

Sous-packages :
- entities/ : Entités métier (Tag, Movie, Rating, Book, Reading, stubs)
- ports/ : Interfaces abstraites et type resultat des appels API
- value_objects/ : Objets valeur immutables (Duration, Platform, Key, OlId)
"""
