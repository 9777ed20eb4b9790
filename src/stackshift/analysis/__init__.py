"""Analyzers that read a project and report what it is built on."""
