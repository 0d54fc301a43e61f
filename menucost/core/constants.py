# Role names stored in user_roles.role
ROLE_ADMIN = "admin"
ROLE_PCP = "pcp"
ROLE_USER = "user"

# Highest privilege first; used when a single role has to be displayed
ROLE_PRECEDENCE = [ROLE_ADMIN, ROLE_PCP, ROLE_USER]

# Report labels
NO_TYPE_LABEL = "No type"
UNCATEGORIZED_LABEL = "Uncategorized"
INGREDIENTS_LABEL = "Ingredients"
DEFAULT_KIT_LABEL = "Kit"
NO_DESCRIPTION_LABEL = "No description"

# Cache scopes
SCOPE_MENUS = "menus"
SCOPE_MENU_TYPES = "menu-types"
SCOPE_PRODUCTS = "products"
SCOPE_KITS = "kits"
SCOPE_CATEGORIES = "categories"
SCOPE_USERS = "users"
