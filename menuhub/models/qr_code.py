from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from menuhub.db.base import Base


class QRCode(Base):
    """
    Printable QR code metadata.

    The encoded payload is the restaurant's public menu URL and is derived
    when the code is rendered, never stored.
    """
    __tablename__ = "qr_codes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False, index=True)
    label = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    restaurant = relationship("Restaurant", back_populates="qr_codes")
