from txjurisdiction.utils.text import extract_phone_number, format_phone, normalize_text, slugify


def test_slugify_strips_spaces_and_punctuation():
    assert slugify("Port Arthur") == "portarthur"
    assert slugify("St. Hedwig") == "sthedwig"
    assert slugify("  League   City ") == "leaguecity"


def test_normalize_text_collapses_whitespace_and_entities():
    assert normalize_text("  Nederland&amp;  Groves ") == "Nederland& Groves"
    assert normalize_text("") == ""


def test_extract_phone_number_formats():
    assert extract_phone_number("Call (409) 983-8600 today") == "(409) 983-8600"
    assert extract_phone_number("Non-emergency: 409-983-8600") == "(409) 983-8600"
    assert extract_phone_number("dispatch 409.983.8600") == "(409) 983-8600"
    assert extract_phone_number("1-409-983-8600") == "(409) 983-8600"
    assert extract_phone_number("no digits here") is None
    assert extract_phone_number("") is None


def test_format_phone_rejects_wrong_length():
    assert format_phone("14099838600") == "(409) 983-8600"
    assert format_phone("98386") is None
