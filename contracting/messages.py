"""User-facing messages (Arabic, the dashboard's display language)."""

API_RUNNING = "Contracting Management API is running"

INVALID_REQUEST = "بيانات الطلب غير صالحة"
NOT_FOUND = "غير موجود"

CLIENT_NAME_REQUIRED = "الاسم مطلوب"
CLIENT_NOT_FOUND = "عميل غير موجود"

PROJECT_FIELDS_REQUIRED = "الكود والاسم والعميل مطلوبة"
PROJECT_CODE_TAKEN = "هذا الكود مستخدم بالفعل"
PROJECT_NOT_FOUND = "المشروع غير موجود"

STATEMENT_FIELDS_REQUIRED = "المشروع، رقم المستخلص، المبلغ، والتاريخ مطلوبة"
STATEMENT_PROJECT_NOT_FOUND = "مشروع غير موجود"
STATEMENT_NOT_FOUND = "المستخلص غير موجود"

SUPPLIER_NAME_REQUIRED = "اسم الشركة مطلوب"
SUPPLIER_NOT_FOUND = "المورد غير موجود"

EMPLOYEE_FIELDS_REQUIRED = "الاسم والوظيفة والتخصص والأجر اليومي (رقم) مطلوبة"
EMPLOYEE_NOT_FOUND = "العامل غير موجود"

EQUIPMENT_FIELDS_REQUIRED = "اسم المعدة، النوع، وتكلفة الإيجار اليومية مطلوبة"
EQUIPMENT_NOT_FOUND = "المعدة غير موجودة"

PAYMENT_FIELDS_REQUIRED = "النوع، المبلغ، التاريخ، طريقة الدفع، والحالة مطلوبة"
PAYMENT_NOT_FOUND = "الدفعة غير موجودة"

# Dashboard labels
UNSPECIFIED_SPECIALIZATION = "غير محدد"
MATERIALS_KEYWORD = "مواد"
