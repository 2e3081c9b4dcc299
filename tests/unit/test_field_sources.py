from dataclasses import dataclass, field
from typing import Annotated, ClassVar

import pytest

from rail_datatables import DataTableColumn, JsonIgnore, JsonName, fields_from_type
from rail_datatables.introspection import DATATABLE_KEY, JSON_IGNORE_KEY, JSON_NAME_KEY
from rail_datatables.introspection.meta import get_model_datatable_meta
from tests.models import ArchivedCompany, Company, Contact, VipContact


class ContactRecord:
    Name: Annotated[str, JsonName("full_name")]
    Email: Annotated[str, DataTableColumn(searchable=True)]
    InternalId: Annotated[str, JsonIgnore()]
    kind: ClassVar[str] = "contact"
    _cache: dict


class ExtendedContactRecord(ContactRecord):
    Phone: str

    @property
    def Label(self) -> Annotated[str, DataTableColumn(orderable=False)]:
        return "label"


@dataclass
class Invoice:
    number: Annotated[str, DataTableColumn(title="No.")]
    total: float = field(metadata={DATATABLE_KEY: DataTableColumn(type="num")})
    customer: str = field(default="", metadata={JSON_NAME_KEY: "customer_name"})
    notes: str = field(default="", metadata={JSON_IGNORE_KEY: True})
    _checksum: str = ""


def _names(field_list):
    return [f.name for f in field_list]


def test_annotated_class_fields():
    field_list = fields_from_type(ContactRecord)

    assert _names(field_list) == ["Name", "Email", "InternalId"]
    name, email, internal = field_list
    assert name.json_name == "full_name"
    assert email.column == DataTableColumn(searchable=True)
    assert internal.ignore is True


def test_annotated_class_inherits_base_fields_first():
    assert _names(fields_from_type(ExtendedContactRecord)) == [
        "Name",
        "Email",
        "InternalId",
        "Phone",
    ]


def test_properties_of_plain_class_are_optional():
    field_list = fields_from_type(ExtendedContactRecord, include_properties=True)

    assert _names(field_list)[-1] == "Label"
    assert field_list[-1].column == DataTableColumn(orderable=False)


def test_dataclass_fields():
    field_list = fields_from_type(Invoice)

    assert _names(field_list) == ["number", "total", "customer", "notes"]
    number, total, customer, notes = field_list
    assert number.column.title == "No."
    assert total.column.type == "num"
    assert customer.json_name == "customer_name"
    assert notes.ignore is True


def test_model_fields_follow_declaration_order():
    field_list = fields_from_type(Contact)

    assert _names(field_list) == ["id", "name", "email", "internal_id", "created_at"]


def test_model_datatable_meta_is_applied():
    by_name = {f.name: f for f in fields_from_type(Contact)}

    assert by_name["name"].json_name == "full_name"
    assert by_name["name"].verbose_name == "full name"
    assert by_name["internal_id"].ignore is True
    assert by_name["email"].column == DataTableColumn(searchable=True, title="E-mail")


def test_model_relations_are_described_by_field_name():
    assert _names(fields_from_type(Company)) == [
        "id",
        "company_name",
        "owner",
        "members",
        "is_active",
    ]


def test_model_properties():
    field_list = fields_from_type(Contact, include_properties=True)

    assert _names(field_list)[-2:] == ["display_label", "email_domain"]
    assert field_list[-2].column == DataTableColumn(orderable=False)


def test_datatable_meta_include_properties_override():
    field_list = fields_from_type(ArchivedCompany)
    by_name = {f.name: f for f in field_list}

    assert "member_count" in by_name
    assert by_name["company_ptr"].ignore is True
    assert _names(field_list)[-2:] == ["archived_at", "member_count"]


def test_datatable_meta_is_not_inherited_from_cache():
    assert get_model_datatable_meta(Company).include_properties is None
    assert get_model_datatable_meta(ArchivedCompany).include_properties is True


def test_non_class_input_raises_type_error():
    with pytest.raises(TypeError):
        fields_from_type(Contact())


class OrderHolder:
    reference: str

    @property
    def open_orders(self) -> "QuerySet[Order]":  # noqa: F821
        return []

    @property
    def total(self) -> "Annotated[float, DataTableColumn(type='num')]":
        return 0.0


def test_unresolvable_property_hints_do_not_break_properties():
    field_list = fields_from_type(OrderHolder, include_properties=True)

    assert _names(field_list) == ["reference", "open_orders", "total"]
    assert field_list[1].column is None
    assert field_list[2].column == DataTableColumn(type="num")


def test_model_property_with_unresolvable_hint():
    field_list = fields_from_type(VipContact, include_properties=True)

    assert _names(field_list)[-1] == "open_orders"


def test_child_model_inherits_parent_datatable_meta():
    by_name = {f.name: f for f in fields_from_type(VipContact)}

    assert by_name["name"].json_name == "full_name"
    assert by_name["internal_id"].ignore is True
    assert by_name["email"].column == DataTableColumn(searchable=True, title="E-mail")
    assert "tier" in by_name
    assert get_model_datatable_meta(VipContact) is not get_model_datatable_meta(Contact)
    assert get_model_datatable_meta(VipContact) == get_model_datatable_meta(Contact)
