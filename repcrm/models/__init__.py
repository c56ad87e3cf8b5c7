"""Pacote de modelos ORM — ponto central de importação.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which Alembic and relationship resolution rely on.

Modules:
    property: imóveis de repasse (Property listings)
    client: clientes compradores/vendedores (Clients)
    match: matches cliente × imóvel (Client-property matches)
    enums: conjuntos fechados e rótulos (Closed value sets and labels)
"""

from repcrm.models.property import Property
from repcrm.models.client import Client
from repcrm.models.match import Match

__all__ = ["Property", "Client", "Match"]
