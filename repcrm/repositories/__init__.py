"""Pacote de repositórios — camada de consultas ao banco.

Repository package — Database query layer.
Each repository extends BaseRepository for generic CRUD and adds domain-specific queries.
"""
