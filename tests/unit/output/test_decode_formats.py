"""Tests for merging output format configuration onto the defaults."""

import pytest

from siteformats.media.exceptions import MediaTypeNotFoundError
from siteformats.media.types import CSS_TYPE, HTML_TYPE, JSON_TYPE, MediaType
from siteformats.output.decode import FormatOverride, decode_formats, normalize_key
from siteformats.output.exceptions import FormatDecodeError
from siteformats.output.format import CSS_FORMAT, HTML_FORMAT, RSS_FORMAT
from siteformats.output.formats import DEFAULT_FORMATS


def test_normalize_key():
    assert normalize_key("baseName") == normalize_key("base_name") == normalize_key("BASENAME") == "basename"
    assert normalize_key("is-plain-text") == "isplaintext"


class TestDecodeDefaults:
    def test_no_maps_returns_defaults(self, media_types):
        assert decode_formats(media_types) == DEFAULT_FORMATS

    def test_empty_map_returns_defaults(self, media_types):
        assert decode_formats(media_types, {}) == DEFAULT_FORMATS


class TestAmendExisting:
    def test_only_given_attribute_changes(self, media_types):
        formats = decode_formats(media_types, {"html": {"baseName": "home"}})

        html = formats.get_by_name("HTML")
        assert html.base_name == "home"
        assert html.media_type == HTML_TYPE
        assert html.rel == "canonical"
        assert html.is_html
        assert html.name == "HTML"
        assert html == HTML_FORMAT.model_copy(update={"base_name": "home"})

    def test_defaults_are_not_mutated(self, media_types):
        decode_formats(media_types, {"html": {"baseName": "home", "rel": "self"}})

        assert HTML_FORMAT.base_name == "index"
        assert DEFAULT_FORMATS.get_by_name("HTML").base_name == "index"

    def test_collection_stays_sorted(self, media_types):
        formats = decode_formats(media_types, {"rss": {"path": "feeds"}, "css": {"rel": "preload"}})

        assert formats.names() == DEFAULT_FORMATS.names()
        assert len(formats) == len(DEFAULT_FORMATS)

    def test_media_type_string_is_resolved(self, media_types):
        formats = decode_formats(media_types, {"CSS": {"mediaType": "application/json"}})

        css = formats.get_by_name("CSS")
        assert css.media_type == JSON_TYPE
        assert css.base_filename() == "styles.json"

    def test_weakly_typed_values(self, media_types):
        formats = decode_formats(
            media_types,
            {"RSS": {"isPlainText": "true", "noUgly": 0, "path": 2017}},
        )

        rss = formats.get_by_name("RSS")
        assert rss.is_plain_text is True
        assert rss.no_ugly is False
        assert rss.path == "2017"

    @pytest.mark.parametrize("key", ["baseName", "base_name", "BASENAME", "base-name"])
    def test_attribute_keys_are_case_insensitive(self, media_types, key):
        formats = decode_formats(media_types, {"HTML": {key: "home"}})
        assert formats.get_by_name("HTML").base_name == "home"

    def test_unknown_attributes_are_ignored(self, media_types):
        formats = decode_formats(media_types, {"CSS": {"colour": "blue", "name": "Styles"}})

        assert formats.get_by_name("CSS") == CSS_FORMAT
        assert formats.get_by_name("Styles") is None

    def test_none_override_changes_nothing(self, media_types):
        assert decode_formats(media_types, {"RSS": None}).get_by_name("RSS") == RSS_FORMAT

    def test_later_maps_amend_earlier_ones(self, media_types):
        formats = decode_formats(
            media_types,
            {"HTML": {"baseName": "home", "rel": "self"}},
            {"html": {"baseName": "start"}},
        )

        html = formats.get_by_name("HTML")
        assert html.base_name == "start"
        assert html.rel == "self"


class TestAddNew:
    def test_new_format_gets_defaults(self, media_types):
        formats = decode_formats(media_types, {"custom": {"mediaType": "text/html"}})

        custom = formats.get_by_name("custom")
        assert custom.name == "custom"
        assert custom.media_type == HTML_TYPE
        assert custom.base_name == "index"
        assert custom.rel == "alternate"
        assert len(formats) == len(DEFAULT_FORMATS) + 1

    def test_empty_base_name_and_rel_get_defaults(self, media_types):
        formats = decode_formats(media_types, {"custom": {"mediaType": "text/css", "baseName": "", "rel": ""}})

        custom = formats.get_by_name("custom")
        assert custom.base_name == "index"
        assert custom.rel == "alternate"

    def test_new_format_keeps_given_values(self, media_types):
        formats = decode_formats(
            media_types,
            {
                "Bookmarks": {
                    "mediaType": "text/plain",
                    "baseName": "bookmarks",
                    "rel": "bookmark",
                    "protocol": "https://",
                    "isPlainText": True,
                }
            },
        )

        bookmarks = formats.get_by_name("bookmarks")
        assert bookmarks.base_filename() == "bookmarks.txt"
        assert bookmarks.rel == "bookmark"
        assert bookmarks.protocol == "https://"
        assert bookmarks.is_plain_text

    def test_new_formats_are_sorted_into_place(self, media_types):
        formats = decode_formats(media_types, {"custom": {"mediaType": "text/html"}, "Api": {"mediaType": "application/json"}})

        assert formats.names() == ["AMP", "Api", "CSS", "CSV", "Calendar", "HTML", "JSON", "RSS", "custom"]

    def test_same_new_name_in_later_map_amends(self, media_types):
        formats = decode_formats(
            media_types,
            {"custom": {"mediaType": "text/html"}},
            {"CUSTOM": {"baseName": "custom"}},
        )

        assert [f.name for f in formats if f.name.lower() == "custom"] == ["custom"]
        assert formats.get_by_name("custom").base_name == "custom"
        assert formats.get_by_name("custom").media_type == HTML_TYPE

    def test_custom_media_type_registry(self, enriched_media_types):
        formats = decode_formats(enriched_media_types, {"Enriched": {"mediaType": "text/enriched"}})

        assert formats.get_by_name("enriched").base_filename() == "index.enr"
        assert formats.get_by_suffix("enr").name == "Enriched"

    def test_media_type_as_mapping(self, media_types):
        formats = decode_formats(
            media_types,
            {"Markdown": {"mediaType": {"main_type": "text", "sub_type": "markdown", "suffix": "md"}}},
        )

        assert formats.get_by_name("markdown").media_type == MediaType(
            main_type="text", sub_type="markdown", suffix="md"
        )

    def test_media_type_instance(self, media_types):
        formats = decode_formats(media_types, {"Styles": {"mediaType": CSS_TYPE}})
        assert formats.get_by_name("styles").media_type == CSS_TYPE


class TestErrors:
    def test_unknown_media_type(self, media_types):
        with pytest.raises(MediaTypeNotFoundError) as excinfo:
            decode_formats(media_types, {"custom": {"mediaType": "text/nope"}})

        assert excinfo.value.media_type == "text/nope"
        assert "text/nope" in str(excinfo.value)

    def test_unknown_media_type_on_existing_format(self, media_types):
        with pytest.raises(MediaTypeNotFoundError):
            decode_formats(media_types, {"HTML": {"mediaType": "text/enriched"}})

        assert DEFAULT_FORMATS.get_by_name("HTML") == HTML_FORMAT

    def test_media_type_must_be_in_given_registry(self, enriched_media_types, media_types):
        decode_formats(enriched_media_types, {"Enriched": {"mediaType": "text/enriched"}})

        with pytest.raises(MediaTypeNotFoundError):
            decode_formats(media_types, {"Enriched": {"mediaType": "text/enriched"}})

    def test_new_format_without_media_type(self, media_types):
        with pytest.raises(FormatDecodeError) as excinfo:
            decode_formats(media_types, {"custom": {"baseName": "custom"}})

        assert excinfo.value.name == "custom"
        assert excinfo.value.errors[0]["loc"] == ("media_type",)

    def test_type_mismatch(self, media_types):
        with pytest.raises(FormatDecodeError) as excinfo:
            decode_formats(media_types, {"HTML": {"isHTML": "maybe"}})

        assert excinfo.value.name == "HTML"
        assert excinfo.value.errors

    def test_override_must_be_a_mapping(self, media_types):
        with pytest.raises(FormatDecodeError):
            decode_formats(media_types, {"HTML": "home"})

    def test_format_name_must_be_a_string(self, media_types):
        with pytest.raises(FormatDecodeError) as excinfo:
            decode_formats(media_types, {2017: {"mediaType": "text/html"}})

        assert excinfo.value.name == "2017"
        assert excinfo.value.errors[0]["type"] == "string_type"


class TestFormatOverride:
    def test_tracks_only_given_fields(self):
        override = FormatOverride.model_validate({"BaseName": "home", "isHTML": "yes"})

        assert override.model_fields_set == {"base_name", "is_html"}
        assert override.is_html is True

    def test_resolves_against_default_media_types_without_context(self):
        override = FormatOverride.model_validate({"mediaType": "TEXT/HTML"})
        assert override.media_type == HTML_TYPE
