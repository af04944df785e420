"""Tests for sfdx_manifest.core.manifest_engine."""

import pytest

from sfdx_manifest.api.exceptions import ManifestParseError, ValidationError
from sfdx_manifest.core.manifest_engine import (
    ManifestEngine,
    build_manifest,
    build_package_xml,
    parse_package_xml,
    write_package_xml,
)
from sfdx_manifest.models import ComponentRecord, ManifestType, PackageManifest


def records(*specs):
    return [ComponentRecord(*spec.split(":", 1)) for spec in specs]


EXPECTED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Package xmlns="http://soap.sforce.com/2006/04/metadata">
    <types>
        <name>ApexClass</name>
        <members>A</members>
        <members>B</members>
    </types>
    <types>
        <name>CustomObject</name>
        <members>Account</members>
    </types>
    <version>58.0</version>
</Package>
"""

EMPTY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Package xmlns="http://soap.sforce.com/2006/04/metadata">
    <version>60.0</version>
</Package>
"""


class TestBuildManifest:
    def test_groups_dedupes_and_sorts(self):
        manifest = build_manifest(
            records("ApexClass:B", "ApexClass:A", "CustomObject:Account", "ApexClass:A"),
            "58.0",
        )

        assert manifest == PackageManifest(
            version="58.0",
            types=(
                ManifestType("ApexClass", ("A", "B")),
                ManifestType("CustomObject", ("Account",)),
            ),
        )

    def test_types_keep_first_seen_order(self):
        manifest = build_manifest(records("CustomObject:X", "ApexClass:Y", "CustomObject:A"), "60.0")
        assert manifest.type_names == ["CustomObject", "ApexClass"]

    def test_accepts_dicts(self):
        manifest = build_manifest([{"type": "ApexClass", "name": "A"}], "60.0")
        assert list(manifest.records()) == [ComponentRecord("ApexClass", "A")]

    @pytest.mark.parametrize("version", ["", "   ", None, 60, " 60.0", "60.0\n", "60\x00.0"])
    def test_invalid_version(self, version):
        with pytest.raises(ValidationError):
            build_manifest([], version)

    def test_invalid_item(self):
        with pytest.raises(ValidationError):
            build_manifest(["ApexClass:A"], "60.0")
        with pytest.raises(ValidationError):
            build_manifest([{"type": "ApexClass"}], "60.0")


class TestBuildPackageXml:
    def test_exact_document(self):
        xml = build_package_xml(
            records("ApexClass:B", "ApexClass:A", "CustomObject:Account", "ApexClass:A"),
            "58.0",
        )
        assert xml == EXPECTED_XML

    def test_empty_selection(self):
        assert build_package_xml([], "60.0") == EMPTY_XML

    def test_special_characters_are_escaped(self):
        xml = build_package_xml(records("Document:Folder/A&B<C>"), "60.0")

        assert "<members>Folder/A&amp;B&lt;C&gt;</members>" in xml
        assert parse_package_xml(xml).types[0].members == ("Folder/A&B<C>",)

    def test_is_deterministic(self):
        selection = records("ApexClass:B", "Workflow:sub/Case", "ApexClass:A")
        assert build_package_xml(selection, "60.0") == build_package_xml(list(selection), "60.0")


class TestRoundTrip:
    @pytest.mark.parametrize("selection", [
        [],
        ["ApexClass:A"],
        ["ApexClass:B", "ApexClass:A", "ApexClass:B"],
        ["CustomObject:Account", "CustomField:Rating__c", "ApexClass:Z", "CustomObject:Contact"],
        ["EmailTemplate:unfiled$public/Welcome", "CustomLabels:CustomLabels"],
    ])
    def test_parse_recovers_grouped_selection(self, selection):
        selected = records(*selection)

        parsed = parse_package_xml(build_package_xml(selected, "59.0"))

        assert parsed == build_manifest(selected, "59.0")
        assert parsed.version == "59.0"

    def test_names_and_version_come_back_unchanged(self):
        selected = [ComponentRecord("Report", "Sales Reports/Q1\tPipeline"), ComponentRecord("ApexClass", "A&B")]

        parsed = parse_package_xml(build_package_xml(selected, "60.0"))

        assert parsed.version == "60.0"
        assert list(parsed.records()) == selected

    @pytest.mark.parametrize("name", [" Padded ", "Padded ", "Bad\x01Name", "Bad\uffffName"])
    def test_names_that_cannot_round_trip_are_refused(self, name):
        with pytest.raises(ValidationError):
            build_package_xml([ComponentRecord("ApexClass", name)], "60.0")
        with pytest.raises(ValidationError):
            build_package_xml([{"type": "ApexClass", "name": name}], "60.0")


class TestParsePackageXml:
    def test_document_without_namespace(self):
        manifest = parse_package_xml(
            "<Package><types><members>*</members><name>ApexClass</name></types><version>57.0</version></Package>"
        )
        assert manifest == PackageManifest("57.0", (ManifestType("ApexClass", ("*",)),))

    def test_name_may_follow_members(self):
        manifest = parse_package_xml(
            "<Package><types><members>A</members><name>ApexClass</name></types><version>57.0</version></Package>"
        )
        assert manifest.types[0] == ManifestType("ApexClass", ("A",))

    @pytest.mark.parametrize("text", [
        "not xml",
        "<Other><version>60.0</version></Other>",
        "<Package><types><members>A</members></types><version>60.0</version></Package>",
        "<Package></Package>",
    ])
    def test_invalid_documents(self, text):
        with pytest.raises(ManifestParseError):
            parse_package_xml(text)


class TestManifestEngine:
    def test_render_uses_engine_version(self):
        engine = ManifestEngine("61.0")
        assert "<version>61.0</version>" in engine.render(records("ApexClass:A"))

    def test_save_and_load(self, tmp_path):
        engine = ManifestEngine("58.0")
        manifest = engine.build(records("ApexClass:B", "ApexClass:A"))

        path = engine.save_manifest(manifest, tmp_path / "manifest" / "package.xml")

        assert path.read_text(encoding="utf-8").startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert engine.load_manifest(path) == manifest

    def test_load_missing_file(self, tmp_path):
        assert ManifestEngine().load_manifest(tmp_path / "package.xml") is None

    def test_write_package_xml_replaces_existing_file(self, tmp_path):
        target = tmp_path / "package.xml"
        target.write_text("old", encoding="utf-8")

        written = write_package_xml(EMPTY_XML, str(target))

        assert written == target
        assert target.read_text(encoding="utf-8") == EMPTY_XML
