"""Skillforge: a catalog of code-generation skills for NestJS and Next.js."""
__version__ = "0.1.0"
