"""Tests for kn output formatting and semantic comparison."""

import pytest
import yaml

from kn.errors import SerializationError
from kn.models import ObjectMeta, Service
from kn.output import (
    format_resource_json,
    format_resource_yaml,
    normalize,
    parse_service,
    render_service,
    semantically_equal,
)


class TestRenderService:
    """Tests for rendering services."""

    def test_render_yaml_sorted(self, expected_service):
        """YAML output has sorted keys and omits unset fields."""
        text = render_service(expected_service)
        data = yaml.safe_load(text)

        assert list(data) == sorted(data)
        assert data["metadata"] == {"name": "foo", "namespace": "default"}
        assert data["spec"]["release"]["revisions"] == ["a", "b"]
        assert "runLatest" not in data["spec"]
        assert "labels" not in data["metadata"]

    def test_render_json(self, expected_service):
        """JSON output is indented."""
        text = render_service(expected_service, "json")
        assert '\n  "apiVersion": "serving.knative.dev/v1alpha1"' in text

    def test_render_unknown_format(self, expected_service):
        """Unknown formats are rejected."""
        with pytest.raises(SerializationError) as exc_info:
            render_service(expected_service, "xml")
        assert "Unknown output format" in str(exc_info.value)

    def test_render_extra_fields(self):
        """Fields not modelled explicitly are kept."""
        service = Service.model_validate(
            {
                "metadata": {"name": "foo"},
                "spec": {"template": {"containers": [{"image": "nginx"}]}},
                "status": {"url": "http://foo.default.example.com"},
            }
        )
        data = yaml.safe_load(render_service(service))
        assert data["spec"]["template"]["containers"][0]["image"] == "nginx"
        assert data["status"]["url"] == "http://foo.default.example.com"


class TestParseService:
    """Tests for parsing rendered text."""

    def test_parse_invalid_yaml(self):
        with pytest.raises(SerializationError):
            parse_service("metadata: [unclosed")

    def test_parse_not_a_mapping(self):
        with pytest.raises(SerializationError) as exc_info:
            parse_service("- a\n- b\n")
        assert "mapping" in str(exc_info.value)

    def test_parse_missing_name(self):
        with pytest.raises(SerializationError):
            parse_service("metadata:\n  namespace: default\n")

    def test_parse_rollout_out_of_range(self):
        with pytest.raises(SerializationError):
            parse_service(
                "metadata:\n  name: foo\n"
                "spec:\n  release:\n    rolloutPercent: 150\n"
            )

    def test_parse_float_rollout(self):
        """A float with no fractional part decodes to the same integer."""
        service = parse_service(
            "metadata:\n  name: foo\nspec:\n  release:\n    rolloutPercent: 10.0\n"
        )
        assert service.spec.release.rolloutPercent == 10


class TestSemanticEquality:
    """Tests for semantically_equal."""

    def test_round_trip(self, expected_service):
        """A rendered service parses back to an equal one."""
        assert semantically_equal(
            expected_service, parse_service(render_service(expected_service))
        )

    def test_key_order_and_whitespace(self, expected_service):
        """Formatting differences do not matter."""
        text = (
            "status: {latestReadyRevisionName: some-revision, domain: knative.com}\n"
            "spec:\n"
            "    release:\n"
            "        rolloutPercent: 10.0\n"
            "        revisions: [a, b]\n"
            "metadata: {namespace: default, name: foo}\n"
        )
        assert semantically_equal(expected_service, parse_service(text))

    def test_differs(self, expected_service):
        other = expected_service.model_copy(deep=True)
        other.spec.release.rolloutPercent = 20
        assert not semantically_equal(expected_service, other)

    def test_revision_order_matters(self, expected_service):
        other = expected_service.model_copy(deep=True)
        other.spec.release.revisions = ["b", "a"]
        assert not semantically_equal(expected_service, other)

    def test_empty_and_missing_equal(self):
        """Empty lists and maps compare equal to unset fields."""
        a = Service(metadata=ObjectMeta(name="foo", labels={}))
        b = Service(metadata=ObjectMeta(name="foo"))
        assert semantically_equal(a, b)

    def test_normalize_numbers(self):
        assert normalize({"a": 10.0, "b": [1.5, 2.0]}) == {"a": 10, "b": [1.5, 2]}

    def test_normalize_drops_empty(self):
        assert normalize({"a": None, "b": [], "c": {}, "d": "x"}) == {"d": "x"}

    def test_dicts(self):
        """Plain mappings can be compared too."""
        assert semantically_equal({"a": 1, "b": {"c": []}}, {"a": 1.0})


class TestFormatResource:
    """Tests for raw resource formatting."""

    def test_format_yaml(self):
        text = format_resource_yaml({"b": 1, "a": {"name": "x"}})
        assert text == "a:\n  name: x\nb: 1\n"

    def test_format_json(self):
        text = format_resource_json({"b": 1, "a": 2})
        assert text == '{\n  "a": 2,\n  "b": 1\n}\n'


class TestSemanticTypes:
    """Type differences that are not representation-only."""

    def test_bool_differs_from_int(self):
        assert not semantically_equal({"x": True}, {"x": 1})
        assert not semantically_equal({"x": False}, {"x": 0})

    def test_bool_equal(self):
        assert semantically_equal({"x": True}, {"x": True})

    def test_bool_extra_status_field(self):
        meta = {"name": "foo"}
        a = Service.model_validate({"metadata": meta, "status": {"ready": True}})
        b = Service.model_validate({"metadata": meta, "status": {"ready": 1}})
        assert not semantically_equal(a, b)

    def test_metadata_extra_fields_rendered(self):
        """Metadata fields not modelled explicitly are kept."""
        service = Service.model_validate(
            {
                "metadata": {
                    "name": "foo",
                    "finalizers": ["serving.knative.dev/route"],
                    "ownerReferences": [{"kind": "Route", "name": "foo"}],
                }
            }
        )
        data = yaml.safe_load(render_service(service))
        assert data["metadata"]["finalizers"] == ["serving.knative.dev/route"]
        assert data["metadata"]["ownerReferences"][0]["kind"] == "Route"
        assert semantically_equal(service, parse_service(render_service(service)))
