"""Core: dominio, contratos, estrategias y servicios (sin I/O)."""
