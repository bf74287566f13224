from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text, func, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from parts_catalog.infra.db.models.base import Base


class ProductRow(Base):
    __tablename__ = "Product"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    sku: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    mpn: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    technical_description: Mapped[str | None] = mapped_column(
        "technicalDescription", Text, nullable=True
    )
    category_id: Mapped[uuid.UUID | None] = mapped_column(
        "categoryId", UUID(as_uuid=True), nullable=True
    )

    connector_type: Mapped[str | None] = mapped_column("connectorType", String(20), nullable=True)
    code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    # Comma-joined set of ratings, see parts_catalog.domain.protection
    degree_of_protection: Mapped[str | None] = mapped_column(
        "degreeOfProtection", String(100), nullable=True
    )
    pins: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)

    in_stock: Mapped[bool] = mapped_column("inStock", Boolean, nullable=False, default=True)
    stock_quantity: Mapped[int | None] = mapped_column("stockQuantity", Integer, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    price_type: Mapped[str] = mapped_column(
        "priceType",
        Text,
        nullable=False,
        default="per_unit",
        server_default="per_unit",
    )

    # JSON arrays: image URLs, and {url, filename, size?} objects
    images: Mapped[list[str]] = mapped_column(
        JSONB, nullable=False, default=list, server_default=text("'[]'::jsonb")
    )
    documents: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, default=list, server_default=text("'[]'::jsonb")
    )
    datasheet_url: Mapped[str | None] = mapped_column("datasheetUrl", Text, nullable=True)
    drawing_url: Mapped[str | None] = mapped_column("drawingUrl", Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
