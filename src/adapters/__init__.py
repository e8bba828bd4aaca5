"""Adaptadores de I/O: cliente HTTP de la API y exportadores."""
