"""Logging and console helpers for the rolltoken command."""
