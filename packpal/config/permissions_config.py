"""
Roles and Capabilities Configuration
This config defines the capability matrix applied to every event.
The matrix is static: a role's capabilities are never stored per event, only
the role assignment is.
"""

# Capabilities a role may hold within one event
CAPABILITIES = {
    "manage_users": "Add and remove members, change member roles",
    "edit_items": "Edit items and categories",
    "delete_items": "Delete items and categories",
    "manage_settings": "Edit event details and delete the event",
    "view_private_items": "See items and notes marked private",
    "add_items": "Add items and categories",
    "export_data": "Export the packing list",
    "manage_templates": "Apply packing templates to the event",
}

# Role definitions
ROLES = {
    "owner": {
        "capabilities": list(CAPABILITIES),
        "description": "Full control of the event, including ownership transfer"
    },
    "admin": {
        "capabilities": list(CAPABILITIES),
        "description": "Full control of the event except ownership"
    },
    "member": {
        "capabilities": ["edit_items", "view_private_items", "add_items", "export_data"],
        "description": "Adds and packs items"
    },
    "viewer": {
        "capabilities": [],
        "description": "Read-only access to the event"
    },
}


def get_capability_matrix():
    """
    Returns the full matrix, one boolean per capability for every role.
    Format: {
        "capabilities": [{"name": "manage_users", "description": "..."}, ...],
        "roles": [
            {
                "name": "owner",
                "description": "...",
                "capabilities": {"manage_users": True, ...}
            },
            ...
        ]
    }
    """
    capabilities = [
        {"name": name, "description": description}
        for name, description in CAPABILITIES.items()
    ]
    roles = []
    for role_name, role_config in ROLES.items():
        granted = set(role_config["capabilities"])
        roles.append({
            "name": role_name,
            "description": role_config["description"],
            "capabilities": {name: name in granted for name in CAPABILITIES}
        })
    return {
        "capabilities": capabilities,
        "roles": roles
    }


CAPABILITY_MATRIX = get_capability_matrix()
