"""Image and document repositories."""

from sqlalchemy.ext.asyncio import AsyncSession

from estates.infrastructure.persistence.models.media import Document, Image
from estates.infrastructure.persistence.repositories.base import BaseRepository


class ImageRepository(BaseRepository[Image]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Image)

    async def delete_many(self, images: list[Image]) -> None:
        for image in images:
            await self.db.delete(image)
        await self.db.flush()


class DocumentRepository(BaseRepository[Document]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Document)

    async def delete_many(self, documents: list[Document]) -> None:
        for document in documents:
            await self.db.delete(document)
        await self.db.flush()
