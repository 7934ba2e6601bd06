"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from obfuscation_checker.domain.catalog import StaticMemberCatalog
from obfuscation_checker.domain.models import MemberKind, TypeInfo
from obfuscation_checker.infrastructure.logging import LoggerSetup

TypeFactory = Callable[..., TypeInfo]


def _build_type(
    name: str,
    namespace: str = "",
    fields: Iterable[str] = (),
    properties: Iterable[str] = (),
    events: Iterable[str] = (),
    methods: Iterable[str] = (),
    special_fields: Iterable[str] = (),
    special_methods: Iterable[str] = (),
) -> TypeInfo:
    type_info = TypeInfo(name=name, namespace=namespace)
    for field_name in fields:
        type_info.add_member(field_name, MemberKind.FIELD)
    for field_name in special_fields:
        type_info.add_member(field_name, MemberKind.FIELD, is_special_name=True)
    for property_name in properties:
        type_info.add_member(property_name, MemberKind.PROPERTY)
    for event_name in events:
        type_info.add_member(event_name, MemberKind.EVENT)
    for method_name in methods:
        type_info.add_member(method_name, MemberKind.METHOD)
    for method_name in special_methods:
        type_info.add_member(method_name, MemberKind.METHOD, is_special_name=True)
    return type_info


@pytest.fixture
def build_type() -> TypeFactory:
    """Factory building a TypeInfo from member name lists."""
    return _build_type


@pytest.fixture
def clean_catalog() -> StaticMemberCatalog:
    """Catalog of a hand-written, unobfuscated library."""
    customer = _build_type(
        "Customer",
        namespace="Shop.Model",
        fields=["_name", "_orders"],
        properties=["Name", "Orders"],
        events=["Changed"],
        methods=["AddOrder", "RemoveOrder", "ToString"],
        special_fields=[],
        special_methods=[".ctor", "get_Name", "get_Orders"],
    )
    order = _build_type(
        "Order",
        namespace="Shop.Model",
        fields=["_total"],
        properties=["Total"],
        methods=["Validate"],
        special_methods=[".ctor", "get_Total"],
    )
    module = _build_type("<Module>")
    return StaticMemberCatalog(
        [module, customer, order],
        custom_attributes=["AssemblyTitleAttribute", "AssemblyVersionAttribute"],
        name="Shop",
    )


@pytest.fixture
def renamed_catalog() -> StaticMemberCatalog:
    """Catalog whose members were renamed with short lowercase names."""
    first = _build_type(
        "a",
        namespace="",
        fields=["a", "b", "c"],
        methods=["a", "b", "Dispose"],
    )
    second = _build_type("b", namespace="", fields=["a"], methods=["a", "b"])
    return StaticMemberCatalog([_build_type("<Module>"), first, second], name="Renamed")


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Start and finish the test with LoggerSetup uninitialized."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
