"""Unit tests for culling functions."""

import pytest

from cci_triage.text_processing.culling import (
    count_words, word_count_cull, whitelist_cull, list_item_cull,
    file_addition_cull, make_culling_function, CULLING_FUNCTIONS
)


class TestWordCountCull:
    """Tests for word_count_cull."""

    def test_remnants_are_not_words(self):
        """Test that markup-only tokens are not counted."""
        assert count_words("''' ]] | [[ word") == 1
        assert count_words("") == 0
        assert count_words("'''Bold''' [[link]]") == 2

    def test_threshold(self):
        """Test the threshold boundary."""
        text = "one two three"
        assert word_count_cull(text, 3)
        assert not word_count_cull(text, 2)

    def test_monotonic_in_threshold(self):
        """Test that raising the threshold only culls more."""
        text = "A short sentence with ''' some ]] remnants, about nine words."
        results = [word_count_cull(text, k) for k in range(0, 20)]
        first = results.index(True)
        assert all(results[first:])
        assert not any(results[:first])


class TestWhitelistCull:
    """Tests for whitelist_cull."""

    @pytest.mark.parametrize("text", [
        "",
        "*",
        "* .",
        "\n\n",
        "{{reflist}}",
        "== References ==\n{{Reflist|30em}}",
        "[[Category:1956 films]]",
        "<ref>{{cite web|url=http://x.com}}</ref>",
        "<!-- hidden note -->",
        "{{DEFAULTSORT:Smiley}}",
        "{{Australia-film-stub}}",
    ])
    def test_benign(self, text):
        assert whitelist_cull(text)

    @pytest.mark.parametrize("text", [
        "Some prose.",
        "[[Wikilink]]",
        "*[[Wikilink]]",
        "{{Infobox film|name=Smiley}}",
        "== Plot ==",
    ])
    def test_not_benign(self, text):
        assert not whitelist_cull(text)


class TestListItemCull:
    """Tests for list_item_cull."""

    def test_single_link_item_is_ambiguous(self):
        """Test that a single link list item is not culled."""
        assert not list_item_cull("*[http://example.com External link]")
        assert not list_item_cull("*[[Wikilink]]")

    def test_bare_links(self):
        """Test that links outside a list are not culled."""
        assert not list_item_cull("[[Wikilink]]\n[[Other]]")
        assert not list_item_cull("[http://example.com Link]")

    def test_link_block(self):
        """Test a block of see-also style entries."""
        assert list_item_cull("* [[First article]]\n* [[Second article|Second]]\n* [http://example.com Site]")
        assert list_item_cull("#[[One]]\n#[[Two]]\n")

    def test_prose_in_block(self):
        """Test that any prose on an item keeps the diff."""
        assert not list_item_cull("* [[First article]]\n* [[Second]] is a well-known novel")
        assert not list_item_cull("* [[File:Photo.jpg|thumb|A caption]]\n* [[Other]]")


class TestFileAdditionCull:
    """Tests for file_addition_cull."""

    def test_caption_is_not_culled(self):
        """Test that a captioned image is kept for review."""
        filestring = ("[[File:St Lawrence Jewry, City of London, UK - Diliff.jpg"
                      "|thumb|right|400px|The interior of St Lawrence Jewry, the official church of the Lord Mayor "
                      "of London, located next to Guildhall in the City of London.]]").lower()
        assert not file_addition_cull(filestring)

    def test_layout_only(self):
        """Test file tags carrying only layout options."""
        assert file_addition_cull("[[File:Example.jpg|thumb|right|250px]]")
        assert file_addition_cull("[[Image:Example.jpg]]")
        assert file_addition_cull("[[File:A.jpg|upright=1.2|left]]\n[[file:b.png|x200px|link=Page]]")

    def test_alt_text_and_nested_links(self):
        """Test that alt text and linked captions block culling."""
        assert not file_addition_cull("[[File:Example.jpg|thumb|alt=A photo of the church]]")
        assert not file_addition_cull("[[File:Example.jpg|thumb|The [[church]] interior]]")

    def test_other_content(self):
        """Test text around the file tag and non-file input."""
        assert not file_addition_cull("[[File:Example.jpg|thumb]] Some text")
        assert not file_addition_cull("")
        assert not file_addition_cull("[[Example]]")


class TestMakeCullingFunction:
    """Tests for culling function lookup."""

    def test_wordcount_binds_threshold(self):
        cull = make_culling_function("wordcount", 2)
        assert cull("one two")
        assert not cull("one two three")

    def test_named_lookup(self):
        assert make_culling_function("whitelist") is CULLING_FUNCTIONS["whitelist"]
        with pytest.raises(ValueError):
            make_culling_function("bogus")

    @pytest.mark.parametrize("name", sorted(CULLING_FUNCTIONS))
    def test_total_on_odd_input(self, name):
        """Test that culling functions never fail on malformed markup."""
        cull = make_culling_function(name, 5)
        for text in ["", "[[", "]]", "{{", "<ref>", "[[File:", "*", "\n\n"]:
            assert isinstance(cull(text), bool)
