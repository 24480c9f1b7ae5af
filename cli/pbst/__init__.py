"""Typer application for building and inspecting persistent trees."""

from .main import app, main

__all__ = ["app", "main"]
