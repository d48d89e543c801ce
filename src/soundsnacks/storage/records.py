"""SQLAlchemy table mappings for categories and sounds."""

from sqlalchemy import Boolean, Column, Integer, String

from soundsnacks.models.category import Category
from soundsnacks.models.sound import Sound
from soundsnacks.storage.database import Base


class CategoryRecord(Base):
    """Stored category row."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    color_hex = Column(String(7), nullable=False)

    @classmethod
    def from_model(cls, category: Category) -> "CategoryRecord":
        return cls(id=category.id, name=category.name, color_hex=category.color_hex)

    def apply(self, category: Category) -> None:
        self.name = category.name
        self.color_hex = category.color_hex

    def to_model(self) -> Category:
        return Category(id=self.id, name=self.name, color_hex=self.color_hex)


class SoundRecord(Base):
    """Stored sound row.

    ``category`` is a plain name, not a foreign key.
    """

    __tablename__ = "sounds"

    id = Column(String(36), primary_key=True)
    description = Column(String(255), nullable=False)
    asset_name = Column(String(255), nullable=True)
    file_name = Column(String(255), nullable=True)
    file_extension = Column(String(16), nullable=True)
    category = Column(String(255), nullable=False, index=True)
    order = Column("sort_order", Integer, nullable=False, default=0)
    is_custom = Column(Boolean, nullable=False, default=False)

    @classmethod
    def from_model(cls, sound: Sound) -> "SoundRecord":
        record = cls(id=sound.id)
        record.apply(sound)
        return record

    def apply(self, sound: Sound) -> None:
        self.description = sound.description
        self.asset_name = sound.asset_name
        self.file_name = sound.file_name
        self.file_extension = sound.file_extension
        self.category = sound.category
        self.order = sound.order
        self.is_custom = sound.is_custom

    def to_model(self) -> Sound:
        return Sound(
            id=self.id,
            description=self.description,
            asset_name=self.asset_name,
            file_name=self.file_name,
            file_extension=self.file_extension,
            category=self.category,
            order=self.order,
            is_custom=self.is_custom,
        )
