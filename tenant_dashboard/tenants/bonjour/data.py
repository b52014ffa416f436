from __future__ import annotations

from tenant_dashboard.customization.data_bag import CustomData

PROPERTY_TYPES_KEY = "propertyTypes"
AMENITIES_KEY = "amenities"
CLIENT_TYPES_KEY = "clientTypes"

custom_data = CustomData(
    {
        PROPERTY_TYPES_KEY: ["Apartment", "House", "Studio"],
        AMENITIES_KEY: ["Parking", "Pet-friendly", "Elevator", "Ground floor"],
        CLIENT_TYPES_KEY: ["Corporate", "Insurance"],
    }
)
