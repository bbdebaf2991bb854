"""Implementaciones concretas de los patrones y sus demos.

Each subpackage implements the contracts in `core.interfaces` and exposes
one `run_*_demo(fixture, console, ...)` entry function.
"""
