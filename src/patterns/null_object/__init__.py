"""Null Object: cuatro variantes del mismo flujo "buscar usuario e informar".

- `problem`: sin comprobación, falla si el usuario no existe.
- `solution`: comprobación de `None` en el cliente.
- `pattern`: el repositorio devuelve siempre un objeto válido.
- `anti_pattern`: como el patrón, pero con `is_null()` y el `if` de vuelta.
"""

from patterns.null_object.demo import VARIANTS, Variant, get_variant, run_null_object_demo

__all__ = [
    "VARIANTS",
    "Variant",
    "get_variant",
    "run_null_object_demo",
]
