from jsonc import version as v


def test_version_string_matches_constant():
    assert v.version() == "0.16.99"


def test_version_num_fields_match_components():
    num = v.version_num()
    assert (num >> 16) & 0xFF == v.MAJOR_VERSION
    assert (num >> 8) & 0xFF == v.MINOR_VERSION
    assert num & 0xFF == v.MICRO_VERSION


def test_version_num_agrees_with_string():
    num = v.version_num()
    text = f"{(num >> 16) & 0xFF}.{(num >> 8) & 0xFF}.{num & 0xFF}"
    assert text == v.version()


def test_version_num_fits_in_24_bits():
    assert 0 <= v.version_num() < (1 << 24)