from enum import Enum

class EntityKind(str, Enum):
    """Entity types an audit entry can target (``target_model``)"""
    EMPLOYEE = "Employee"
    PRODUCT = "Product"
    CATEGORY = "Category"
    ORDER = "Order"
    BRAND = "Brand"
    SHIPPING = "Shipping"
    CUSTOMER = "Customer"
    HERO = "Hero"
    REVIEW = "Review"
    SETTINGS = "Settings"

class AuditStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

class AuditAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    STATUS_UPDATE = "status.update"
    PAYMENT_UPDATE = "payment.update"
    SHIPPING_UPDATE = "shipping.update"

class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"

class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPING = "SHIPPING"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

class Permission(str, Enum):
    """Dashboard permissions; member name is the code, value the stored string"""
    ALL = "ALL"

    PRODUCTS_VIEW = "products.view"
    PRODUCTS_CREATE = "products.create"
    PRODUCTS_EDIT = "products.edit"
    PRODUCTS_DELETE = "products.delete"

    BRANDS_VIEW = "brands.view"
    BRANDS_CREATE = "brands.create"
    BRANDS_EDIT = "brands.edit"
    BRANDS_DELETE = "brands.delete"

    CATEGORIES_VIEW = "categories.view"
    CATEGORIES_CREATE = "categories.create"
    CATEGORIES_EDIT = "categories.edit"
    CATEGORIES_DELETE = "categories.delete"

    ORDERS_VIEW = "orders.view"
    ORDERS_CREATE = "orders.create"
    ORDERS_EDIT = "orders.edit"
    ORDERS_DELETE = "orders.delete"

    CUSTOMERS_VIEW = "customers.view"
    CUSTOMERS_CREATE = "customers.create"
    CUSTOMERS_EDIT = "customers.edit"
    CUSTOMERS_DELETE = "customers.delete"

    REVIEWS_VIEW = "reviews.view"
    REVIEWS_REPLY = "reviews.reply"
    REVIEWS_DELETE = "reviews.delete"

    HERO_VIEW = "hero.view"
    HERO_CREATE = "hero.create"
    HERO_EDIT = "hero.edit"
    HERO_DELETE = "hero.delete"

    SHIPPING_VIEW = "shipping.view"
    SHIPPING_CREATE = "shipping.create"
    SHIPPING_EDIT = "shipping.edit"
    SHIPPING_DELETE = "shipping.delete"

    SETTINGS_VIEW = "settings.view"
    SETTINGS_EDIT = "settings.edit"

    EMPLOYEES_VIEW = "employees.view"
    EMPLOYEES_CREATE = "employees.create"
    EMPLOYEES_EDIT = "employees.edit"
    EMPLOYEES_DELETE = "employees.delete"

    STATISTICS_VIEW = "statistics.view"

    @classmethod
    def lookup(cls, code: str):
        """Resolve either the member name (``PRODUCTS_VIEW``) or its value"""
        if code in cls.__members__:
            return cls[code]
        try:
            return cls(code)
        except ValueError:
            return None

# Dashboard sections in sidebar order
DASHBOARD_SECTIONS = [
    "statistics",
    "products",
    "brands",
    "categories",
    "orders",
    "customers",
    "reviews",
    "hero",
    "settings",
    "employees",
    "shipping",
]
