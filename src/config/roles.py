from enum import Enum


class Role(str, Enum):
    """Canonical roles. ADMIN lives on the user, PM and DEVELOPER on a channel member."""
    NONE = ""
    ADMIN = "admin"
    PM = "pm"
    DEVELOPER = "developer"


# Localized role names accepted in commands
ROLE_SYNONYMS = {
    "": Role.DEVELOPER,  # no role given means developer
    "developer": Role.DEVELOPER,
    "разработчик": Role.DEVELOPER,
    "pm": Role.PM,
    "пм": Role.PM,
    "admin": Role.ADMIN,
    "админ": Role.ADMIN,
}

# Access tiers, lower number means more privilege
ACCESS_LEVELS = {
    "MANAGER": 1,   # Configured workspace manager
    "ADMIN": 2,     # Workspace admin
    "PM": 3,        # PM of the current channel
    "DEFAULT": 4    # Everyone else
}

# Least privileged tier allowed to assign each role
ADD_ROLE_MAX_LEVEL = {
    Role.ADMIN: ACCESS_LEVELS["ADMIN"],
    Role.PM: ACCESS_LEVELS["ADMIN"],
    Role.DEVELOPER: ACCESS_LEVELS["PM"]
}

# Least privileged tier allowed to remove each role
DELETE_ROLE_MAX_LEVEL = {
    Role.ADMIN: ACCESS_LEVELS["ADMIN"],
    Role.PM: ACCESS_LEVELS["PM"],
    Role.DEVELOPER: ACCESS_LEVELS["PM"]
}


def canonical_role(raw_role):
    """Map a localized role name to a Role, or None if it is not a known name"""
    return ROLE_SYNONYMS.get(raw_role.strip().lower())
