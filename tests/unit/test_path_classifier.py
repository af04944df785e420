"""Tests for sfdx_manifest.core.path_classifier."""

import pytest

from sfdx_manifest.core.path_classifier import classify_path, normalize_path, strip_meta_suffix
from sfdx_manifest.models import ComponentRecord


class TestDefaultClassification:
    """Files outside the custom object special cases."""

    def test_apex_class_and_sidecar_map_to_same_name(self):
        assert classify_path("AccountService.cls", "ApexClass") == ComponentRecord("ApexClass", "AccountService")
        assert classify_path("AccountService.cls-meta.xml", "ApexClass") == ComponentRecord("ApexClass", "AccountService")

    def test_dot_meta_suffix_is_stripped(self):
        assert classify_path("Logo.meta.xml", "StaticResource") == ComponentRecord("StaticResource", "Logo")

    @pytest.mark.parametrize("path", ["a/b/c/Foo.ext", "x/y/Foo.ext", "Foo.ext"])
    def test_directories_are_discarded_for_plain_types(self, path):
        assert classify_path(path, "ApexClass").name == "Foo"

    @pytest.mark.parametrize("folder_type", ["Report", "Dashboard", "EmailTemplate", "Document", "Flow", "Workflow"])
    def test_folder_aware_types_keep_structure(self, folder_type):
        record = classify_path("a/b/Foo.report-meta.xml", folder_type)
        assert record == ComponentRecord(folder_type, "a/b/Foo")

    def test_windows_separators_are_normalized(self):
        assert classify_path("a\\b\\Foo.report-meta.xml", "Report").name == "a/b/Foo"
        assert classify_path("util\\StringUtils.cls", "ApexClass").name == "StringUtils"

    def test_only_one_extension_is_removed(self):
        assert classify_path("My.Page.page", "ApexPage").name == "My.Page"

    def test_file_without_extension(self):
        assert classify_path("README", "ApexClass").name == "README"

    def test_hidden_files_are_rejected(self):
        assert classify_path(".DS_Store", "StaticResource") is None
        assert classify_path("sub/.gitkeep", "ApexClass") is None

    def test_empty_name_is_rejected(self):
        assert classify_path("-meta.xml", "ApexClass") is None
        assert classify_path("", "ApexClass") is None

    @pytest.mark.parametrize("path, folder_type", [
        ("Bad\x01Name.cls", "ApexClass"),
        ("Bad\ufffeName.cls", "ApexClass"),
        (" Padded.cls", "ApexClass"),
        ("Padded .cls-meta.xml", "ApexClass"),
        ("Account/fields/Bad\x1fField.field-meta.xml", "CustomObject"),
    ])
    def test_names_xml_cannot_carry_are_rejected(self, path, folder_type):
        assert classify_path(path, folder_type) is None

    def test_inner_spaces_and_tabs_are_kept(self):
        assert classify_path("Sales Reports/Q1\tPipeline.report-meta.xml", "Report").name == "Sales Reports/Q1\tPipeline"

    def test_custom_labels_is_a_single_component(self):
        assert classify_path("CustomLabels.labels-meta.xml", "CustomLabels") == ComponentRecord("CustomLabels", "CustomLabels")
        assert classify_path("nested/Anything.xml", "CustomLabels") == ComponentRecord("CustomLabels", "CustomLabels")

    def test_custom_labels_hidden_file_still_rejected(self):
        assert classify_path(".hidden", "CustomLabels") is None


class TestCustomObjectClassification:
    """Sub-components stored inside the objects folder."""

    def test_field_in_object_folder(self):
        record = classify_path("objects/Account/fields/MyField__c.field-meta.xml", "CustomObject")
        assert record == ComponentRecord("CustomField", "MyField__c")

    @pytest.mark.parametrize("folder, suffix, expected_type", [
        ("fields", ".field-meta.xml", "CustomField"),
        ("validationRules", ".validationRule-meta.xml", "ValidationRule"),
        ("listViews", ".listView-meta.xml", "ListView"),
        ("webLinks", ".webLink-meta.xml", "WebLink"),
        ("recordTypes", ".recordType-meta.xml", "RecordType"),
        ("compactLayouts", ".compactLayout-meta.xml", "CompactLayout"),
        ("businessProcesses", ".businessProcess-meta.xml", "BusinessProcess"),
    ])
    def test_sub_components_are_reclassified(self, folder, suffix, expected_type):
        record = classify_path(f"Account/{folder}/Child{suffix}", "CustomObject")
        assert record == ComponentRecord(expected_type, "Child")

    def test_object_definition(self):
        assert classify_path("Account/Account.object-meta.xml", "CustomObject") == ComponentRecord("CustomObject", "Account")

    def test_windows_separators_in_object_paths(self):
        record = classify_path("Account\\fields\\Rating__c.field-meta.xml", "CustomObject")
        assert record == ComponentRecord("CustomField", "Rating__c")

    def test_sub_folders_only_apply_to_custom_objects(self):
        record = classify_path("fields/MyField__c.field-meta.xml", "ApexClass")
        assert record == ComponentRecord("ApexClass", "MyField__c")


class TestHelpers:
    def test_normalize_path(self):
        assert normalize_path("a\\b/c") == "a/b/c"

    def test_strip_meta_suffix(self):
        assert strip_meta_suffix("Foo.cls-meta.xml") == "Foo.cls"
        assert strip_meta_suffix("Foo.meta.xml") == "Foo"
        assert strip_meta_suffix("Foo.cls") == "Foo.cls"
