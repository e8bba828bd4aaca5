"""Servicios de alto nivel sobre el contexto de la API."""
