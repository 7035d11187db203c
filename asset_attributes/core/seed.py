"""
Static fixture data loaded into a fresh AttributeStore.

Nothing here is persisted; a store reset (or a process restart) brings
the library, categories, manufacturers and core attributes back to
exactly this state.
"""
from typing import Any, Dict

SEED_DATA: Dict[str, Any] = {
    "attributes": [
        # System attributes
        {
            "id": "manufacturer",
            "label": "Manufacturer",
            "type": "dropdown",
            "is_system": True,
            "is_required": True,
            "applied_to_categories": ["boiler", "cctv", "pump"],
            "description": "Equipment manufacturer",
        },
        {
            "id": "model",
            "label": "Model",
            "type": "dropdown",
            "is_system": True,
            "is_required": True,
            "applied_to_categories": ["boiler", "cctv", "pump"],
            "description": "Equipment model",
        },
        {
            "id": "flue-type",
            "label": "Flue Type",
            "type": "dropdown",
            "is_system": True,
            "is_required": False,
            "applied_to_categories": ["boiler"],
            "description": "Type of flue system",
        },
        {
            "id": "gas-pressure",
            "label": "Gas Pressure",
            "type": "number",
            "is_system": True,
            "is_required": False,
            "applied_to_categories": ["boiler"],
            "description": "Gas pressure in mbar",
            "units": "mbar",
        },
        # Custom attributes
        {
            "id": "inspection-frequency",
            "label": "Inspection Frequency",
            "type": "dropdown",
            "is_system": False,
            "is_required": False,
            "applied_to_categories": ["boiler", "cctv", "pump"],
            "description": "How often equipment should be inspected",
            "dropdown_options": ["Monthly", "Quarterly", "Annually"],
        },
        {
            "id": "height",
            "label": "Height (mm)",
            "type": "number",
            "is_system": False,
            "is_required": False,
            "applied_to_categories": ["boiler"],
            "description": "Height of the equipment in millimeters",
            "units": "mm",
        },
        {
            "id": "pressure-rating",
            "label": "Pressure Rating",
            "type": "number",
            "is_system": False,
            "is_required": False,
            "applied_to_categories": [],
            "description": "Maximum pressure rating in bar",
            "units": "bar",
        },
        {
            "id": "safety-certificate",
            "label": "Safety Certificate",
            "type": "text",
            "is_system": False,
            "is_required": False,
            "applied_to_categories": [],
            "description": "Safety certificate reference number",
        },
        {
            "id": "installation-date",
            "label": "Installation Date",
            "type": "date",
            "is_system": False,
            "is_required": False,
            "applied_to_categories": [],
            "description": "Date of installation",
        },
    ],
    "categories": [
        {
            "id": "boiler",
            "name": "Boiler",
            "system_attributes": [
                {"attribute_id": "manufacturer", "is_enabled": True, "order": 0},
                {"attribute_id": "model", "is_enabled": True, "order": 1},
                {"attribute_id": "flue-type", "is_enabled": True, "order": 2},
                {"attribute_id": "gas-pressure", "is_enabled": True, "order": 3},
            ],
            "custom_attributes": [
                {"attribute_id": "inspection-frequency", "is_enabled": True, "order": 0},
                {"attribute_id": "height", "is_enabled": True, "order": 1},
            ],
        },
        {
            "id": "cctv",
            "name": "CCTV",
            "system_attributes": [
                {"attribute_id": "manufacturer", "is_enabled": True, "order": 0},
                {"attribute_id": "model", "is_enabled": True, "order": 1},
            ],
            "custom_attributes": [
                {"attribute_id": "inspection-frequency", "is_enabled": True, "order": 0},
            ],
        },
        {
            "id": "pump",
            "name": "Pump",
            "system_attributes": [
                {"attribute_id": "manufacturer", "is_enabled": True, "order": 0},
                {"attribute_id": "model", "is_enabled": True, "order": 1},
            ],
            "custom_attributes": [
                {"attribute_id": "inspection-frequency", "is_enabled": True, "order": 0},
            ],
        },
    ],
    "manufacturers": [
        {
            "id": "vaillant",
            "name": "Vaillant",
            "models": [
                {"id": "ecotec-pro", "name": "ecoTEC Pro"},
                {"id": "ecotec-plus", "name": "ecoTEC Plus"},
            ],
            "used_by_categories": ["boiler"],
        },
        {
            "id": "worcester-bosch",
            "name": "Worcester Bosch",
            "models": [
                {"id": "greenstar", "name": "Greenstar"},
                {"id": "cdi-compact", "name": "CDI Compact"},
            ],
            "used_by_categories": ["boiler"],
        },
    ],
    "core_attributes": [
        {
            "id": "global-asset-id",
            "label": "Asset ID",
            "type": "text",
            "section": "asset-info",
            "is_enabled": True,
            "is_required": True,
        },
        {
            "id": "global-manufacturer",
            "label": "Manufacturer",
            "type": "search",
            "section": "asset-info",
            "is_enabled": True,
            "is_required": False,
        },
        {
            "id": "global-model",
            "label": "Model",
            "type": "search",
            "section": "asset-info",
            "is_enabled": True,
            "is_required": False,
        },
        {
            "id": "global-condition",
            "label": "Condition",
            "type": "dropdown",
            "section": "status",
            "is_enabled": True,
            "is_required": False,
            "dropdown_options": ["Good", "Fair", "Poor"],
        },
        {
            "id": "global-location",
            "label": "Location",
            "type": "text",
            "section": "contact",
            "is_enabled": True,
            "is_required": False,
        },
        {
            "id": "global-date-installation",
            "label": "Date of installation",
            "type": "date",
            "section": "dates",
            "is_enabled": True,
            "is_required": False,
        },
        {
            "id": "global-end-of-life",
            "label": "End of life",
            "type": "date",
            "section": "dates",
            "is_enabled": False,
            "is_required": False,
        },
        {
            "id": "global-warranty-expiry",
            "label": "Warranty expiry",
            "type": "date",
            "section": "warranty",
            "is_enabled": True,
            "is_required": False,
        },
    ],
}
