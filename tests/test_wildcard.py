"""
Tests for wildcard name matching.
"""

import pytest

from tfsync.wildcard import match_wildcard_name


class TestMatchWildcardName:

    @pytest.mark.parametrize(
        "wildcard, name",
        [
            ("*-terraform-workspace", "hcp-terraform-workspace"),
            ("hcp-terraform-*", "hcp-terraform-workspace"),
            ("*-terraform-*", "hcp-terraform-workspace"),
            ("hcp-terraform-workspace", "hcp-terraform-workspace"),
        ],
    )
    def test_matches(self, wildcard, name):
        assert match_wildcard_name(wildcard, name)

    @pytest.mark.parametrize(
        "wildcard, name",
        [
            ("*-terraform-workspace", "hcp-tf-workspace"),
            ("hcp-terraform-*", "hashicorp-tf-workspace"),
            ("*-terraform-*", "hcp-tf-workspace"),
            ("hcp-terraform-workspace", "hcp-tf-workspace"),
        ],
    )
    def test_does_not_match(self, wildcard, name):
        assert not match_wildcard_name(wildcard, name)

    def test_single_star_matches_everything(self):
        assert match_wildcard_name("*", "anything")
        assert match_wildcard_name("*", "")
