"""Capa de presentación: aplicación Typer y componentes Rich."""
