"""
Tests for the person converter.
"""
from __future__ import annotations

import pytest

from gramps_tree.converters.person import convert_person, primary_surname
from gramps_tree.errors import ConversionError


class TestConvertPerson:
    """Tests for convert_person."""

    def test_basic_fields(self, make_person):
        """Identity and name fields are copied."""
        result = convert_person(make_person())
        assert result.id == "I0001"
        assert result.gramps_handle == "h001"
        assert result.gramps_id == "I0001"
        assert result.first_name == "John"
        assert result.last_name == "Smith"
        assert result.suffix == "Jr."
        assert result.gender == "M"
        assert result.full_name == "John Smith Jr."

    @pytest.mark.parametrize(
        "gender,expected",
        [(0, "U"), (1, "M"), (2, "F"), (3, "U"), (-1, "U"), (None, "U"), ("1", "U"), (True, "U")],
    )
    def test_gender_codes(self, make_person, gender, expected):
        """Only 1 and 2 map to M and F; everything else is U."""
        assert convert_person(make_person(gender=gender)).gender == expected

    def test_family_ids(self, make_person):
        """Owned and parent family handles are copied in order."""
        result = convert_person(make_person(family_list=["f2", "f1"], parent_family_list=["f0"]))
        assert result.family_ids == ("f2", "f1")
        assert result.parent_family_ids == ("f0",)

    def test_missing_family_lists(self, make_person):
        """Absent family lists become empty."""
        person = make_person()
        del person["family_list"]
        del person["parent_family_list"]
        result = convert_person(person)
        assert result.family_ids == ()
        assert result.parent_family_ids == ()

    def test_birth_death_left_empty(self, make_person, event_ref):
        """The converter does no event lookups."""
        result = convert_person(make_person(birth_ref_index=0, event_ref_list=[event_ref("eh001")]))
        assert result.birth_date is None
        assert result.birth_place is None
        assert result.death_date is None
        assert result.death_place is None

    def test_missing_name_parts_default_to_empty(self, make_person):
        """Missing first name and suffix become empty strings."""
        person = make_person()
        del person["primary_name"]["first_name"]
        person["primary_name"]["suffix"] = None
        result = convert_person(person)
        assert result.first_name == ""
        assert result.suffix == ""

    def test_missing_primary_name_raises(self, make_person):
        """A person without primary_name cannot be converted."""
        person = make_person()
        del person["primary_name"]
        with pytest.raises(ConversionError) as excinfo:
            convert_person(person)
        assert excinfo.value.kind == "person"
        assert excinfo.value.gramps_id == "I0001"
        assert "primary_name" in str(excinfo.value)

    def test_missing_handle_raises(self, make_person):
        """Identity is never invented."""
        person = make_person()
        del person["handle"]
        with pytest.raises(ConversionError):
            convert_person(person)

    def test_non_mapping_raises(self):
        """A record that is not an object is rejected."""
        with pytest.raises(ConversionError):
            convert_person(["not", "a", "person"])

    def test_to_dict_uses_display_keys(self, make_person):
        """to_dict produces the camelCase display shape."""
        data = convert_person(make_person()).to_dict()
        assert data["grampsHandle"] == "h001"
        assert data["firstName"] == "John"
        assert data["birthDate"] is None
        assert data["familyIds"] == ["fh001"]
        assert data["parentFamilyIds"] == ["fh000"]


class TestPrimarySurname:
    """Tests for primary_surname."""

    def _surname(self, surname, primary=False):
        return {"surname": surname, "primary": primary}

    def test_primary_flag_wins(self):
        """The surname flagged primary is chosen even if not first."""
        name = {"surname_list": [self._surname("Jones"), self._surname("Smith", primary=True)]}
        assert primary_surname(name) == "Smith"

    def test_falls_back_to_first(self):
        """Without a primary flag the first surname is used."""
        name = {"surname_list": [self._surname("Jones"), self._surname("Smith")]}
        assert primary_surname(name) == "Jones"

    def test_empty_list(self):
        """An empty surname list gives an empty last name."""
        assert primary_surname({"surname_list": []}) == ""

    def test_missing_list(self):
        """A name without surname_list gives an empty last name."""
        assert primary_surname({}) == ""

    def test_malformed_list_raises(self):
        """A surname_list that is not a list is a conversion failure."""
        with pytest.raises(ConversionError):
            primary_surname({"surname_list": "Smith"})
