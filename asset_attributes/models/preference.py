from sqlalchemy import Column, DateTime, String, func
from asset_attributes.db.session import Base

class Preference(Base):
    __tablename__ = "preferences"

    key = Column(String, primary_key=True, index=True)
    # JSON literal, e.g. "true"
    value = Column(String, nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
