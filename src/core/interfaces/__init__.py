"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los patrones concretos.
- Los demos dependen de estas capacidades, nunca de clases concretas.
"""
