"""Repositório CRUD base — pai de todos os repositórios.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations with owner scoping.

Usage:
    class ClientRepository(BaseRepository[Client]):
        def __init__(self) -> None:
            super().__init__(Client)
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.database import Base

# Tipo genérico — Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

# Valor de filtro que significa "sem filtro" (opção "Todos" das telas)
ALL: str = "all"


class BaseRepository(Generic[ModelType]):
    """Repositório CRUD genérico.

    Generic CRUD repository providing common database operations.
    Queries are scoped by user_id when the model has that column.

    Attributes:
        model: classe do modelo SQLAlchemy (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _scoped(self, query: Select, user_id: UUID | None) -> Select:
        # Aplica o dono quando informado e suportado pelo modelo
        if user_id is not None and hasattr(self.model, "user_id"):
            query = query.where(self.model.user_id == user_id)
        return query

    @staticmethod
    def _apply_equals(query: Select, column: Any, value: str | None) -> Select:
        """Filtro de igualdade que ignora None e "all"."""
        if value is None or value == ALL:
            return query
        return query.where(column == value)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
        user_id: UUID | None = None,
    ) -> ModelType | None:
        """Busca um registro pelo ID.

        Retrieve a single record by its UUID.

        Args:
            db: sessão assíncrona (Async database session)
            record_id: UUID do registro (UUID of the record to retrieve)
            user_id: dono; None dispensa o filtro (Owner scope; None skips it)

        Returns:
            ModelType | None: registro ou None (Found record or None)
        """
        query: Select = self._scoped(select(self.model).where(self.model.id == record_id), user_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """Cria um novo registro — Create a new record in the database."""
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
        user_id: UUID | None = None,
    ) -> ModelType | None:
        """Atualiza um registro existente.

        Update an existing record by its UUID.

        Args:
            db: sessão assíncrona (Async database session)
            record_id: UUID do registro (UUID of the record to update)
            update_data: campos e valores (Fields and values to update)
            user_id: dono (Owner scope filter)

        Returns:
            ModelType | None: registro atualizado ou None (Updated record or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return None

        # Só os campos enviados (exclude_unset); None também é aceito
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
        user_id: UUID | None = None,
    ) -> bool:
        """Remove um registro; devolve False se não existir.

        Delete a record by its UUID.
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """Verifica se existe registro com os filtros dados.

        Check if a record matching the given filters exists.
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
