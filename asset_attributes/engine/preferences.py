import json
from typing import Callable, Optional
from loguru import logger
from sqlalchemy.orm import Session
from asset_attributes.models.preference import Preference

PARENT_INHERITANCE_KEY = "enableParentInheritance"

class PreferenceStore:
    """
    The one durable setting: whether category screens request inherited
    attributes. Stored as a JSON literal; an absent or malformed value
    reads as True.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory
        self._parent_inheritance: Optional[bool] = None

    def get_parent_inheritance(self) -> bool:
        if self._parent_inheritance is None:
            self._parent_inheritance = self._load(PARENT_INHERITANCE_KEY, default=True)
        return self._parent_inheritance

    def toggle_parent_inheritance(self) -> bool:
        value = not self.get_parent_inheritance()
        self._save(PARENT_INHERITANCE_KEY, value)
        self._parent_inheritance = value
        logger.info(f"Parent inheritance {'enabled' if value else 'disabled'}")
        return value

    def _load(self, key: str, default: bool) -> bool:
        db = self.session_factory()
        try:
            row = db.get(Preference, key)
        finally:
            db.close()

        if row is None or row.value is None:
            return default
        try:
            value = json.loads(row.value)
        except ValueError:
            logger.warning(f"Preference {key} holds malformed value {row.value!r}, using {default}")
            return default
        if not isinstance(value, bool):
            logger.warning(f"Preference {key} is not a boolean ({row.value!r}), using {default}")
            return default
        return value

    def _save(self, key: str, value: bool) -> None:
        db = self.session_factory()
        try:
            row = db.get(Preference, key)
            if row is None:
                row = Preference(key=key)
                db.add(row)
            row.value = json.dumps(value)
            db.commit()
        finally:
            db.close()
