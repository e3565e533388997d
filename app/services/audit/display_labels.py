# Arabic display strings used when rendering audit entries in the dashboard

from app.models.shared.enums import EntityKind, Gender, OrderStatus, Permission

NOT_SPECIFIED = "غير محدد"
EMPTY = "فارغ"
INVALID_VALUE = "قيمة غير صالحة"
NONE_LABEL = "لا يوجد"
YES = "نعم"
NO = "لا"
ACTIVE = "نشط"
INACTIVE = "غير نشط"
LIST_SEPARATOR = "، "

FIELD_LABELS = {
    "name": "الاسم",
    "email": "البريد الإلكتروني",
    "phone": "رقم الهاتف",
    "job_title": "المسمى الوظيفي",
    "gender": "الجنس",
    "permissions": "الصلاحيات",
    "is_active": "الحالة",
    "password": "كلمة المرور",
    "avatar": "الصورة الشخصية",
    "title": "العنوان",
    "description": "الوصف",
    "price": "السعر",
    "status": "الحالة",
    "category": "التصنيف",
    "parent_id": "التصنيف الأب",
    "slug": "الرابط",
    "image": "الصورة",
    "brand": "العلامة التجارية",
    "stock": "المخزون",
    "images": "الصور",
    "deleted_subcategories": "التصنيفات الفرعية المحذوفة",
}

GENDER_LABELS = {
    Gender.MALE: "ذكر",
    Gender.FEMALE: "أنثى",
}

ORDER_STATUS_LABELS = {
    OrderStatus.PENDING: "قيد الانتظار",
    OrderStatus.CONFIRMED: "مؤكد",
    OrderStatus.PROCESSING: "قيد المعالجة",
    OrderStatus.SHIPPING: "قيد الشحن",
    OrderStatus.DELIVERED: "تم التوصيل",
    OrderStatus.COMPLETED: "مكتمل",
    OrderStatus.CANCELLED: "ملغي",
}

PERMISSION_LABELS = {
    Permission.ALL: "جميع الصلاحيات",
    Permission.PRODUCTS_VIEW: "عرض المنتجات",
    Permission.PRODUCTS_CREATE: "إضافة منتجات",
    Permission.PRODUCTS_EDIT: "تعديل المنتجات",
    Permission.PRODUCTS_DELETE: "حذف المنتجات",
    Permission.BRANDS_VIEW: "عرض العلامات التجارية",
    Permission.BRANDS_CREATE: "إضافة علامات تجارية",
    Permission.BRANDS_EDIT: "تعديل العلامات التجارية",
    Permission.BRANDS_DELETE: "حذف العلامات التجارية",
    Permission.CATEGORIES_VIEW: "عرض الفئات",
    Permission.CATEGORIES_CREATE: "إضافة فئات",
    Permission.CATEGORIES_EDIT: "تعديل الفئات",
    Permission.CATEGORIES_DELETE: "حذف الفئات",
    Permission.ORDERS_VIEW: "عرض الطلبات",
    Permission.ORDERS_CREATE: "إضافة طلبات",
    Permission.ORDERS_EDIT: "تعديل الطلبات",
    Permission.ORDERS_DELETE: "حذف الطلبات",
    Permission.CUSTOMERS_VIEW: "عرض العملاء",
    Permission.CUSTOMERS_CREATE: "إضافة عملاء",
    Permission.CUSTOMERS_EDIT: "تعديل العملاء",
    Permission.CUSTOMERS_DELETE: "حذف العملاء",
    Permission.REVIEWS_VIEW: "عرض التقييمات",
    Permission.REVIEWS_REPLY: "الرد على التقييمات",
    Permission.REVIEWS_DELETE: "حذف التقييمات",
    Permission.HERO_VIEW: "عرض الشرائح الرئيسية",
    Permission.HERO_CREATE: "إضافة شرائح رئيسية",
    Permission.HERO_EDIT: "تعديل الشرائح الرئيسية",
    Permission.HERO_DELETE: "حذف الشرائح الرئيسية",
    Permission.SHIPPING_VIEW: "عرض طرق الشحن",
    Permission.SHIPPING_CREATE: "إضافة طرق شحن",
    Permission.SHIPPING_EDIT: "تعديل طرق الشحن",
    Permission.SHIPPING_DELETE: "حذف طرق الشحن",
    Permission.SETTINGS_VIEW: "عرض الإعدادات",
    Permission.SETTINGS_EDIT: "تعديل الإعدادات",
    Permission.EMPLOYEES_VIEW: "عرض الموظفين",
    Permission.EMPLOYEES_CREATE: "إضافة موظفين",
    Permission.EMPLOYEES_EDIT: "تعديل الموظفين",
    Permission.EMPLOYEES_DELETE: "حذف الموظفين",
    Permission.STATISTICS_VIEW: "عرض الإحصائيات",
}

ENTITY_LABELS = {
    EntityKind.PRODUCT: "منتج",
    EntityKind.CATEGORY: "تصنيف",
    EntityKind.ORDER: "طلب",
    EntityKind.EMPLOYEE: "موظف",
    EntityKind.CUSTOMER: "عميل",
    EntityKind.BRAND: "علامة تجارية",
    EntityKind.HERO: "قسم رئيسي",
    EntityKind.REVIEW: "تقييم",
    EntityKind.SHIPPING: "شحن",
    EntityKind.SETTINGS: "إعدادات",
}

ACTION_LABELS = {
    "create": "إضافة",
    "update": "تعديل",
    "delete": "حذف",
    "status.update": "تحديث الحالة",
    "payment.update": "تحديث الدفع",
    "shipping.update": "تحديث الشحن",
}
