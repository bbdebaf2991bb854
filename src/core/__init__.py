"""Core: configuración, modelos, contratos y utilidades compartidas por los demos."""
