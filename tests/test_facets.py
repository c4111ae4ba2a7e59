"""
Tests for the facet filter.
"""

import pytest


class TestFacetSelection:
    """Tests for FacetSelection."""

    def test_search_text_is_trimmed_and_lowercased(self):
        from app.reporting.facets import FacetSelection

        assert FacetSelection(search="  BioLogía ").search_text == "biología"

    def test_search_text_empty_when_unset(self):
        from app.reporting.facets import FacetSelection

        assert FacetSelection().search_text == ""
        assert FacetSelection(search="   ").search_text == ""


class TestFilterCertificates:
    """Tests for filter_certificates."""

    def test_empty_selection_returns_everything_in_order(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection())

        assert [c.title for c in result] == ["A", "B", "C"]

    @pytest.mark.parametrize("unset", [None, "", "all"])
    def test_unset_markers_disable_a_facet(self, example_certificates, unset):
        from app.reporting.facets import FacetSelection, filter_certificates

        selection = FacetSelection(type=unset, department=unset, semester_term=unset)

        assert len(filter_certificates(example_certificates, selection)) == 3

    def test_filter_by_year(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection(year=2023))

        assert [c.title for c in result] == ["A", "B"]

    def test_raw_string_matches_enum_value(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(
            example_certificates,
            FacetSelection(type="diplomado", semester_term="ene-jun"),
        )

        assert [c.title for c in result] == ["A", "C"]

    def test_facets_combine_with_and(self, example_certificates):
        from app.models.enums import CertificateType, Department
        from app.reporting.facets import FacetSelection, filter_certificates

        selection = FacetSelection(
            type=CertificateType.DIPLOMA,
            department=Department.ENGINEERING,
        )

        assert [c.title for c in filter_certificates(example_certificates, selection)] == ["A"]

    def test_search_matches_title_description_or_issuer(self, certificate_factory):
        from app.reporting.facets import FacetSelection, filter_certificates

        certificates = [
            certificate_factory(title="Taller de Python"),
            certificate_factory(title="X", description="Introducción a PYTHON"),
            certificate_factory(title="Y", issuer="Python Software Foundation"),
            certificate_factory(title="Z", description=None, issuer=None),
        ]

        result = filter_certificates(certificates, FacetSelection(search=" python "))

        assert len(result) == 3
        assert certificates[3] not in result

    def test_search_does_not_look_at_department(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection(search="bio"))

        assert result == []

    def test_unknown_value_yields_empty_list(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection(type="no-existe"))

        assert result == []

    def test_filter_is_idempotent(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        selection = FacetSelection(year=2023, search="a")
        once = filter_certificates(example_certificates, selection)

        assert filter_certificates(once, selection) == once

    def test_department_only(self, example_certificates):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection(department="ingenieria"))

        assert [c.title for c in result] == ["A", "B"]

    @pytest.mark.parametrize("search", ["   ", "\t", " \n "])
    def test_whitespace_search_keeps_everything(self, example_certificates, search):
        from app.reporting.facets import FacetSelection, filter_certificates

        result = filter_certificates(example_certificates, FacetSelection(search=search))

        assert result == example_certificates


def _mixed_collection(make):
    from app.models.enums import CertificateType, Department, SemesterTerm

    return [
        make(title="Python básico", type=CertificateType.DIPLOMA, year=2023),
        make(title="Didáctica", type=CertificateType.TEACHING_WORKSHOP, department=Department.ARTS),
        make(
            title="Ecología",
            department=Department.OTHER,
            department_other="Biología",
            semester_term=SemesterTerm.JUL_DEC,
            issuer="Facultad de Ciencias",
        ),
        make(title="Python avanzado", type=CertificateType.DIPLOMA, semester_term=SemesterTerm.JUL_DEC),
        make(title="MOOC de datos", type=CertificateType.MOOC, year=2022, description="python y datos"),
    ]


class TestFilterProperties:
    """Properties that hold for any selection."""

    SELECTIONS = [
        {"type": "diplomado"},
        {"type": "diplomado", "year": 2024},
        {"department": "ingenieria", "semester_term": "jul-dic"},
        {"department": "otro", "search": "ciencias"},
        {"type": "diplomado", "semester_term": "jul-dic", "year": 2024, "search": "python"},
        {"year": 2022, "search": "DATOS"},
        {"type": "mooc", "department": "artes"},
    ]

    @pytest.mark.parametrize("facets", SELECTIONS)
    def test_dropping_a_facet_never_shrinks_the_result(self, certificate_factory, facets):
        from dataclasses import replace

        from app.reporting.facets import FacetSelection, filter_certificates

        certificates = _mixed_collection(certificate_factory)
        selection = FacetSelection(**facets)
        narrow = filter_certificates(certificates, selection)

        for facet in facets:
            wider = filter_certificates(certificates, replace(selection, **{facet: None}))
            assert len(wider) >= len(narrow)
            assert all(c in wider for c in narrow)

    @pytest.mark.parametrize("facets", SELECTIONS)
    def test_result_is_an_ordered_subsequence(self, certificate_factory, facets):
        from app.reporting.facets import FacetSelection, filter_certificates

        certificates = _mixed_collection(certificate_factory)
        result = filter_certificates(certificates, FacetSelection(**facets))

        positions = [certificates.index(c) for c in result]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("facets", SELECTIONS)
    def test_filter_is_idempotent(self, certificate_factory, facets):
        from app.reporting.facets import FacetSelection, filter_certificates

        certificates = _mixed_collection(certificate_factory)
        selection = FacetSelection(**facets)
        once = filter_certificates(certificates, selection)

        assert filter_certificates(once, selection) == once
