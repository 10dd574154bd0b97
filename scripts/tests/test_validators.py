"""Tests for validators.py — package, project name, Camel DSL and Camel version checks."""

from camelgen.models import DSLValidation
from camelgen.validators import (
    WSDL2REST_DSL_MESSAGE,
    validate_camel_dsl,
    validate_camel_version,
    validate_package,
    validate_project_name,
)


class TestValidatePackage:
    def test_valid_package(self):
        assert validate_package("com.valid") is True

    def test_single_segment(self):
        assert validate_package("routes") is True

    def test_underscores_and_digits(self):
        assert validate_package("com.my_company.v2") is True

    def test_invalid_characters(self):
        assert validate_package("invalid@.pkg.name") is not True

    def test_java_keyword(self):
        assert validate_package("a.name.with.package") is not True

    def test_literal_is_reserved(self):
        assert validate_package("com.true.routes") is False

    def test_segment_starting_with_digit(self):
        assert validate_package("com.1example") is False

    def test_empty_segment(self):
        assert validate_package("com..example") is False
        assert validate_package("com.example.") is False

    def test_empty_string(self):
        assert validate_package("") is False

    def test_hyphen_not_allowed(self):
        assert validate_package("com.my-app") is False


class TestValidateCamelDSL:
    def test_spring_without_wsdl2rest(self):
        assert validate_camel_dsl("spring", False) == DSLValidation(True)

    def test_spring_with_wsdl2rest(self):
        assert validate_camel_dsl("spring", True).valid is True

    def test_blueprint_without_wsdl2rest(self):
        assert validate_camel_dsl("blueprint", False).valid is True

    def test_blueprint_with_wsdl2rest(self):
        assert validate_camel_dsl("blueprint", True).valid is True

    def test_java_without_wsdl2rest(self):
        assert validate_camel_dsl("java", False).valid is True

    def test_java_with_wsdl2rest_rejected(self):
        result = validate_camel_dsl("java", True)
        assert result.valid is False
        assert result.message == WSDL2REST_DSL_MESSAGE
        assert result.message == "When using wsdl2rest, the Camel DSL must be either 'spring' or 'blueprint'."

    def test_valid_result_has_no_message(self):
        assert validate_camel_dsl("spring", True).message is None

    def test_unknown_dsl(self):
        result = validate_camel_dsl("kotlin", False)
        assert result.valid is False
        assert "kotlin" in result.message
        assert "spring" in result.message


class TestValidateCamelVersion:
    def test_release(self):
        assert validate_camel_version("2.22.2") is True

    def test_fuse_qualifier(self):
        assert validate_camel_version("2.21.0.fuse-710018") is True

    def test_milestone(self):
        assert validate_camel_version("3.0.0-M1") is True

    def test_missing_patch(self):
        assert validate_camel_version("2.22") is False

    def test_garbage(self):
        assert validate_camel_version("latest") is False

    def test_empty(self):
        assert validate_camel_version("") is False


class TestValidateProjectName:
    def test_plain_name(self):
        assert validate_project_name("MyAppMock") is True

    def test_hyphen_dot_underscore(self):
        assert validate_project_name("order-service") is True
        assert validate_project_name("a.b_c") is True

    def test_markup_characters(self):
        assert validate_project_name("R&D<App>") is False

    def test_whitespace(self):
        assert validate_project_name("my app") is False

    def test_empty(self):
        assert validate_project_name("") is False
