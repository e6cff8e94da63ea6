"""
Unit tests for the schema validator.
"""

from decimal import Decimal

import pytest

from app.core.errors import BadRequestError
from app.core.filters import Unparseable
from app.core.validation import parse, validate
from app.schemas.job import JobNew, JobSearch


class TestCreateSchema:

    def test_valid_payload(self):
        assert validate({"title": "Dev", "salary": 1, "equity": "0.5", "companyHandle": "c1"}, "create") == []

    def test_salary_and_equity_optional(self):
        assert validate({"title": "Dev", "companyHandle": "c1"}, "create") == []

    def test_nulls_allowed(self):
        assert validate({"title": "Dev", "salary": None, "equity": None, "companyHandle": "c1"}, "create") == []

    def test_missing_required(self):
        errors = validate({}, "create")

        assert len(errors) == 2
        assert 'instance requires property "title"' in errors
        assert 'instance requires property "companyHandle"' in errors

    def test_additional_property(self):
        errors = validate({"title": "Dev", "companyHandle": "c1", "extra": 1}, "create")
        assert errors == ['instance is not allowed to have the additional property "extra"']

    def test_snake_case_keys_are_not_aliases(self):
        errors = validate({"title": "Dev", "company_handle": "c1"}, "create")

        assert 'instance requires property "companyHandle"' in errors
        assert 'instance is not allowed to have the additional property "company_handle"' in errors

    @pytest.mark.parametrize("salary", ["100", 1.5, True, -1])
    def test_bad_salary(self, salary):
        errors = validate({"title": "Dev", "salary": salary, "companyHandle": "c1"}, "create")

        assert len(errors) == 1
        assert errors[0].startswith("instance.salary ")

    @pytest.mark.parametrize("equity", ["abc", 1.01, "-0.1", True, [0.1]])
    def test_bad_equity(self, equity):
        errors = validate({"title": "Dev", "equity": equity, "companyHandle": "c1"}, "create")

        assert len(errors) == 1
        assert errors[0].startswith("instance.equity ")

    @pytest.mark.parametrize("payload", [None, [], "job", 5])
    def test_non_object_payload(self, payload):
        assert len(validate(payload, "create")) == 1

    def test_parse_returns_typed_model(self):
        job = parse({"title": "Dev", "equity": 0.25, "companyHandle": "c1"}, "create")

        assert isinstance(job, JobNew)
        assert job.company_handle == "c1"
        assert job.equity == Decimal("0.25")

    def test_parse_raises_bad_request(self):
        with pytest.raises(BadRequestError) as exc_info:
            parse({"title": 5}, "create")

        assert exc_info.value.status_code == 400
        assert len(exc_info.value.detail) == 2


class TestUpdateSchema:

    def test_partial_payload(self):
        assert validate({"salary": 5}, "update") == []

    def test_empty_payload_is_structurally_valid(self):
        assert validate({}, "update") == []

    def test_null_title_rejected(self):
        errors = validate({"title": None}, "update")

        assert len(errors) == 1
        assert errors[0].startswith("instance.title ")

    def test_nullable_fields_accept_null(self):
        assert validate({"salary": None, "equity": None}, "update") == []

    def test_salary_above_column_range(self):
        assert len(validate({"salary": 2_147_483_648}, "update")) == 1
        assert validate({"salary": 2_147_483_647}, "update") == []

    @pytest.mark.parametrize("field", ["id", "companyHandle"])
    def test_immutable_fields_rejected(self, field):
        errors = validate({field: "x"}, "update")
        assert errors == [f'instance is not allowed to have the additional property "{field}"']


class TestSearchSchema:

    def test_normalized_filters(self):
        filters = parse({"minSalary": 10, "hasEquity": True, "title": "dev"}, "search")

        assert isinstance(filters, JobSearch)
        assert filters.min_salary == 10
        assert filters.has_equity is True
        assert filters.title == "dev"

    def test_defaults(self):
        filters = parse({}, "search")

        assert filters.min_salary is None
        assert filters.has_equity is False
        assert filters.title is None

    def test_unparseable_min_salary(self):
        errors = validate({"minSalary": Unparseable("abc"), "hasEquity": False}, "search")
        assert errors == ['instance.minSalary "abc" is not an integer']

    def test_string_has_equity_rejected(self):
        assert len(validate({"hasEquity": "true"}, "search")) == 1

    def test_unknown_filter_rejected(self):
        assert len(validate({"hasEquity": False, "sort": "title"}, "search")) == 1


def test_unknown_schema_name():
    with pytest.raises(KeyError):
        validate({}, "delete")
