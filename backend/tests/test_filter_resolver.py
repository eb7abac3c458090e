"""
Tests for list-query filter resolution.
"""

import pytest

from app.core.constants import FilterIssueKind
from app.filtering import (
    BandContains,
    BooleanEquals,
    ExactMatch,
    FilterErrors,
    FilterPredicate,
    FilterRequest,
    resolve_filters,
)
from app.filtering import fields


def resolve(**params):
    return resolve_filters(FilterRequest(params))


class TestIndependentFilters:
    """inpatientLimit needs nothing else."""

    def test_empty_request_gives_empty_predicate(self):
        result = resolve()
        assert isinstance(result, FilterPredicate)
        assert result.is_empty

    def test_inpatient_limit_alone(self):
        result = resolve(inpatientLimit="500000")
        assert isinstance(result, FilterPredicate)
        assert result.constraints == (ExactMatch(fields.INPATIENT_LIMIT, 500000),)

    def test_inpatient_limit_is_parsed_as_integer(self):
        result = resolve(inpatientLimit=" 750000 ")
        assert result.constraints[0].value == 750000

    def test_unparseable_inpatient_limit(self):
        result = resolve(inpatientLimit="lots")
        assert isinstance(result, FilterErrors)
        assert [i.kind for i in result.issues] == [FilterIssueKind.UNPARSEABLE]
        assert result.messages == ["Inpatient limit must be a whole number."]

    @pytest.mark.parametrize("raw", ["1e5", "5.0", "1_000", "0x10", "12abc"])
    def test_integer_parsing_is_strict(self, raw):
        result = resolve(inpatientLimit=raw)
        assert isinstance(result, FilterErrors)
        assert result.issues[0].kind == FilterIssueKind.UNPARSEABLE

    def test_negative_inpatient_limit_is_out_of_range(self):
        result = resolve(inpatientLimit="-1")
        assert isinstance(result, FilterErrors)
        assert result.issues[0].kind == FilterIssueKind.OUT_OF_RANGE
        assert result.messages == ["Inpatient limit must not be negative."]

    def test_oversized_inpatient_limit_is_out_of_range(self):
        result = resolve(inpatientLimit="99999999999999999999")
        assert isinstance(result, FilterErrors)
        assert result.issues[0].kind == FilterIssueKind.OUT_OF_RANGE
        assert result.messages == ["Inpatient limit must be at most 2147483647."]

    def test_largest_stored_integer_is_accepted(self):
        result = resolve(inpatientLimit="2147483647")
        assert result == FilterPredicate((ExactMatch(fields.INPATIENT_LIMIT, 2147483647),))

    def test_oversized_spouse_age_is_out_of_range(self):
        result = resolve(inpatientLimit="100", principalAge="30", spouseAge="3000000000")
        assert isinstance(result, FilterErrors)
        assert [issue.parameter for issue in result.issues] == ["spouseAge"]
        assert result.issues[0].kind == FilterIssueKind.OUT_OF_RANGE

    def test_unknown_parameters_are_ignored(self):
        result = resolve_filters({"inpatientLimit": "100", "sort": "asc"})
        assert result == FilterPredicate((ExactMatch(fields.INPATIENT_LIMIT, 100),))

    def test_blank_values_count_as_absent(self):
        result = resolve(inpatientLimit="100", companyName="  ")
        assert result == FilterPredicate((ExactMatch(fields.INPATIENT_LIMIT, 100),))


class TestDependentFilters:
    """Filters that require inpatientLimit (and sometimes principalAge)."""

    def test_company_name_without_inpatient_limit(self):
        result = resolve(companyName="Jubilee Health")
        assert isinstance(result, FilterErrors)
        assert len(result) == 1
        issue = result.issues[0]
        assert issue.kind == FilterIssueKind.MISSING_DEPENDENCY
        assert issue.parameter == "companyName"
        assert issue.missing == ("inpatientLimit",)
        assert issue.message == "Filtering by company name requires specifying an inpatient limit."

    def test_company_name_with_inpatient_limit(self):
        result = resolve(inpatientLimit="500000", companyName="Jubilee Health")
        assert result.constraints == (
            ExactMatch(fields.INPATIENT_LIMIT, 500000),
            ExactMatch(fields.COMPANY_NAME, "Jubilee Health"),
        )

    def test_outpatient_limit_requires_inpatient_limit(self):
        result = resolve(outpatientLimit="20000")
        assert isinstance(result, FilterErrors)
        assert result.messages == [
            "Filtering by outpatient limit requires specifying an inpatient limit."
        ]

    def test_principal_age_adds_band_constraint(self):
        result = resolve(inpatientLimit="500000", principalAge="30")
        assert BandContains(fields.AGE_MINIMUM, fields.AGE_MAXIMUM, 30) in result.constraints

    def test_principal_age_requires_inpatient_limit(self):
        result = resolve(principalAge="30")
        assert isinstance(result, FilterErrors)
        assert result.issues[0].missing == ("inpatientLimit",)

    def test_spouse_age_requires_principal_age(self):
        result = resolve(inpatientLimit="500000", spouseAge="28")
        assert isinstance(result, FilterErrors)
        issue = result.issues[0]
        assert issue.parameter == "spouseAge"
        assert issue.missing == ("principalAge",)
        assert issue.message == (
            "Filtering by spouse age requires specifying both an inpatient limit and a principal age."
        )

    def test_spouse_age_names_every_missing_prerequisite(self):
        result = resolve(spouseAge="28")
        assert result.issues[0].missing == ("inpatientLimit", "principalAge")

    def test_spouse_age_is_an_independent_band_check(self):
        result = resolve(inpatientLimit="500000", principalAge="30", spouseAge="70")
        bands = [c for c in result.constraints if isinstance(c, BandContains)]
        assert bands == [
            BandContains(fields.AGE_MINIMUM, fields.AGE_MAXIMUM, 30),
            BandContains(fields.AGE_MINIMUM, fields.AGE_MAXIMUM, 70),
        ]

        plan = {"inpatientLimit": 500000, "ageMinimum": 18, "ageMaximum": 65}
        assert not result.matches(plan)
        assert resolve(inpatientLimit="500000", principalAge="30").matches(plan)

    def test_maternity_true(self):
        result = resolve(inpatientLimit="500000", principalAge="30", maternity="true")
        assert BooleanEquals(fields.MATERNITY_INCLUDED, True) in result.constraints

    @pytest.mark.parametrize("raw", ["false", "True", "yes", "0"])
    def test_maternity_anything_but_literal_true_is_false(self, raw):
        result = resolve(inpatientLimit="500000", principalAge="30", maternity=raw)
        assert BooleanEquals(fields.MATERNITY_INCLUDED, False) in result.constraints

    def test_maternity_requires_principal_age(self):
        result = resolve(inpatientLimit="500000", maternity="true")
        assert isinstance(result, FilterErrors)
        assert result.messages == [
            "Filtering by maternity cover requires specifying both an inpatient limit and a principal age."
        ]


class TestNumberOfKids:
    def test_valid_number_of_kids(self):
        result = resolve(inpatientLimit="500000", principalAge="30", numberOfKids="2")
        assert BooleanEquals(fields.ALLOWS_KIDS, True) in result.constraints

    @pytest.mark.parametrize("raw", ["0", "6", "-2", "10"])
    def test_out_of_range(self, raw):
        result = resolve(inpatientLimit="500000", principalAge="30", numberOfKids=raw)
        assert isinstance(result, FilterErrors)
        assert [i.kind for i in result.issues] == [FilterIssueKind.OUT_OF_RANGE]
        assert result.messages == ["Number of kids must be between 1 and 5."]

    @pytest.mark.parametrize("raw", ["1", "5"])
    def test_bounds_are_inclusive(self, raw):
        result = resolve(inpatientLimit="500000", principalAge="30", numberOfKids=raw)
        assert isinstance(result, FilterPredicate)

    def test_unparseable_is_distinct_from_missing_dependency(self):
        result = resolve(inpatientLimit="500000", principalAge="30", numberOfKids="two")
        assert isinstance(result, FilterErrors)
        assert [i.kind for i in result.issues] == [FilterIssueKind.UNPARSEABLE]

    def test_range_and_dependency_issues_accumulate(self):
        result = resolve(inpatientLimit="500000", numberOfKids="6")
        assert isinstance(result, FilterErrors)
        assert [i.kind for i in result.issues] == [
            FilterIssueKind.MISSING_DEPENDENCY,
            FilterIssueKind.OUT_OF_RANGE,
        ]


class TestCoverFilters:
    """dental / optical depend on a real outpatient limit."""

    def test_dental_forces_optical(self):
        result = resolve(inpatientLimit="500000", outpatientLimit="20000", dental="yes")
        assert BooleanEquals(fields.DENTAL_INCLUDED, True) in result.constraints
        assert BooleanEquals(fields.OPTICAL_INCLUDED, True) in result.constraints

    def test_optical_alone(self):
        result = resolve(inpatientLimit="500000", outpatientLimit="20000", optical="yes")
        assert BooleanEquals(fields.OPTICAL_INCLUDED, True) in result.constraints
        assert all(
            getattr(c, "field", None) != fields.DENTAL_INCLUDED for c in result.constraints
        )

    def test_dental_and_optical_do_not_duplicate_constraints(self):
        result = resolve(
            inpatientLimit="500000", outpatientLimit="20000", dental="yes", optical="yes"
        )
        optical = [c for c in result.constraints if c == BooleanEquals(fields.OPTICAL_INCLUDED, True)]
        assert len(optical) == 1

    def test_dental_value_other_than_yes_adds_nothing(self):
        result = resolve(inpatientLimit="500000", dental="no")
        assert result == FilterPredicate((ExactMatch(fields.INPATIENT_LIMIT, 500000),))

    @pytest.mark.parametrize(
        "params",
        [
            {"dental": "yes", "outpatientLimit": "none"},
            {"dental": "yes", "outpatientLimit": "none", "inpatientLimit": "500000", "principalAge": "30"},
            {"dental": "yes", "inpatientLimit": "500000"},
            {"dental": "yes", "outpatientLimit": "NONE", "inpatientLimit": "500000"},
        ],
    )
    def test_dental_without_real_outpatient_limit(self, params):
        result = resolve(**params)
        assert isinstance(result, FilterErrors)
        assert result.issues[0].kind == FilterIssueKind.MISSING_DEPENDENCY
        assert result.issues[0].parameter == "dental"
        assert "Filtering by dental cover requires specifying an outpatient limit." in result.messages

    def test_optical_without_outpatient_limit(self):
        result = resolve(inpatientLimit="500000", optical="yes")
        assert result.messages == [
            "Filtering by optical cover requires specifying an outpatient limit."
        ]


class TestOutpatientSentinel:
    def test_none_is_not_a_filter_value(self):
        result = resolve(inpatientLimit="500000", outpatientLimit="none")
        assert result == FilterPredicate((ExactMatch(fields.INPATIENT_LIMIT, 500000),))

    def test_none_does_not_need_inpatient_limit(self):
        result = resolve(outpatientLimit="none")
        assert isinstance(result, FilterPredicate)
        assert result.is_empty

    def test_unparseable_outpatient_limit(self):
        result = resolve(inpatientLimit="500000", outpatientLimit="some")
        assert isinstance(result, FilterErrors)
        assert result.issues[0].kind == FilterIssueKind.UNPARSEABLE


class TestAccumulation:
    def test_every_violation_is_reported(self):
        result = resolve(
            companyName="Jubilee Health",
            outpatientLimit="20000",
            spouseAge="28",
            numberOfKids="6",
            maternity="true",
        )
        assert isinstance(result, FilterErrors)
        assert [i.parameter for i in result.issues] == [
            "companyName",
            "outpatientLimit",
            "spouseAge",
            "numberOfKids",
            "numberOfKids",
            "maternity",
        ]

    def test_messages_are_distinct(self):
        result = resolve(companyName="A", principalAge="30", spouseAge="31")
        assert len(result.messages) == len(set(result.messages))

    def test_no_partial_predicate_on_failure(self):
        result = resolve(inpatientLimit="500000", companyName="Jubilee Health", spouseAge="28")
        assert isinstance(result, FilterErrors)
        assert not isinstance(result, FilterPredicate)

    def test_joined_message(self):
        result = resolve(companyName="A", principalAge="30")
        assert result.joined() == (
            "Filtering by company name requires specifying an inpatient limit. "
            "Filtering by principal age requires specifying an inpatient limit."
        )


class TestResolution:
    def test_idempotent(self):
        request = FilterRequest(
            {"inpatientLimit": "500000", "principalAge": "30", "spouseAge": "33", "maternity": "true"}
        )
        assert resolve_filters(request) == resolve_filters(request)

    def test_full_scenario(self):
        result = resolve(
            inpatientLimit="500000",
            principalAge="30",
            dental="yes",
            outpatientLimit="20000",
        )
        assert isinstance(result, FilterPredicate)
        assert result.constraints == (
            ExactMatch(fields.INPATIENT_LIMIT, 500000),
            ExactMatch(fields.OUTPATIENT_LIMIT, 20000),
            BandContains(fields.AGE_MINIMUM, fields.AGE_MAXIMUM, 30),
            BooleanEquals(fields.DENTAL_INCLUDED, True),
            BooleanEquals(fields.OPTICAL_INCLUDED, True),
        )

    def test_accepts_plain_mapping(self):
        assert resolve_filters({"inpatientLimit": "1"}) == resolve(inpatientLimit="1")
