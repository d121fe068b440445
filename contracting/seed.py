"""Demo data the API boots with.

One record per collection (two payments), inserted through the store so
the id counters end up right after them.
"""

from .models import (
    Client,
    Employee,
    EmployeeStatus,
    Equipment,
    EquipmentStatus,
    Payment,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    Project,
    ProjectStatus,
    Statement,
    StatementStatus,
    Supplier,
)
from .storage import EntityKind, EntityStore


def demo_records() -> list[tuple[EntityKind, object]]:
    """Demo records in insertion order (references assume an empty store)."""
    return [
        (EntityKind.CLIENTS, Client(
            name="شركة التطوير العقاري",
            contact_person="أحمد علي",
            phone="01000000000",
            email="client@example.com",
            address="القاهرة، مصر",
        )),
        (EntityKind.PROJECTS, Project(
            code="PRJ-001",
            name="برج سكني – المرحلة الأولى",
            client_id=1,
            status=ProjectStatus.IN_PROGRESS,
            progress=35,
            budget=15000000,
            location="القاهرة الجديدة",
        )),
        (EntityKind.SUPPLIERS, Supplier(
            company_name="شركة مواد البناء المتحدة",
            contact_person="مسؤول المشتريات",
            phone="0500000000",
            email="supplier@example.com",
            materials="حديد، أسمنت، رمل",
            payment_terms="30 يوم",
            balance=20000,
        )),
        (EntityKind.EMPLOYEES, Employee(
            name="عامل تجريبي",
            job_title="عامل موقع",
            specialization="عمالة عامة",
            daily_wage=150,
            phone="0550000000",
            project_name="برج سكني – المرحلة الأولى",
            status=EmployeeStatus.ACTIVE,
        )),
        (EntityKind.EQUIPMENT, Equipment(
            name="حفار صغير",
            type="حفار",
            daily_cost=400,
            maintenance_date="2026-01-15",
            project_name="نقطة فايبر سكوب",
            status=EquipmentStatus.IN_USE,
        )),
        (EntityKind.STATEMENTS, Statement(
            project_id=1,
            number="11",
            amount=100000,
            date="2026-01-12",
            description="مستخلص أول للمشروع",
            status=StatementStatus.PAID,
        )),
        (EntityKind.PAYMENTS, Payment(
            type=PaymentType.OUTGOING,
            amount=527,
            date="2026-03-01",
            description="دفعة",
            payment_method=PaymentMethod.CASH,
            status=PaymentStatus.COMPLETED,
            related_party="مشروع اكس",
        )),
        (EntityKind.PAYMENTS, Payment(
            type=PaymentType.INCOMING,
            amount=198,
            date="2026-06-01",
            description="1axna",
            payment_method=PaymentMethod.BANK_TRANSFER,
            status=PaymentStatus.COMPLETED,
            related_party="aaa",
        )),
    ]


def load_demo_data(store: EntityStore) -> int:
    """Insert the demo records, return how many were inserted."""
    records = demo_records()
    for kind, record in records:
        store.insert(kind, record)
    return len(records)
