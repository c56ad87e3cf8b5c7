"""Utilitários — exceções HTTP, JWT e formatação pt-BR.

Utility package — HTTP exceptions, JWT verification and pt-BR formatting helpers.
"""
