import pytest

from class_stripper.cleaner.application.services.structural_optimizer import (
    StructuralOptimizer,
    is_empty_div,
    is_wrapper_div,
)
from class_stripper.cleaner.domain.statistics import CleaningStatistics
from class_stripper.cleaner.domain.value_objects.cleaning_config import CleaningConfig


@pytest.fixture
def optimizer():
    return StructuralOptimizer()


class TestPredicates:
    def test_wrapper_div(self, parse):
        soup = parse("<div>\n  <div>a</div>\n  <!-- note --><div>b</div>\n</div>")
        assert is_wrapper_div(soup.div) is True

    def test_div_with_text_is_not_wrapper(self, parse):
        soup = parse("<div>text<div>a</div></div>")
        assert is_wrapper_div(soup.div) is False

    def test_div_with_other_element_is_not_wrapper(self, parse):
        soup = parse("<div><div>a</div><span>b</span></div>")
        assert is_wrapper_div(soup.div) is False

    def test_empty_div_is_not_wrapper(self, parse):
        soup = parse("<div> </div>")
        assert is_wrapper_div(soup.div) is False
        assert is_empty_div(soup.div) is True

    def test_non_div_is_never_empty(self, parse):
        soup = parse("<span></span><div><br></div><div><!-- only a comment --></div>")
        divs = soup.find_all("div")
        assert is_empty_div(soup.span) is False
        assert is_empty_div(divs[0]) is False
        assert is_empty_div(divs[1]) is True


class TestBubbling:
    def test_nested_wrappers_bubble_in_one_run(self, optimizer, parse, stats):
        soup = parse("<div><div><div><p>Content</p></div></div></div>")
        assert optimizer.bubble_up_wrappers(soup, stats) == 2
        assert str(soup) == "<div><p>Content</p></div>"
        assert stats.divs_bubbled_up == 2

    def test_children_keep_their_order(self, optimizer, parse, stats):
        soup = parse('<section><div><div id="a">a</div> <div id="b">b</div></div></section>')
        optimizer.bubble_up_wrappers(soup, stats)
        assert str(soup) == '<section><div id="a">a</div><div id="b">b</div></section>'
        assert stats.divs_bubbled_up == 1

    def test_sweep_ceiling_bounds_work(self, parse, stats):
        soup = parse("<div><div><div><p>x</p></div></div></div>")
        optimizer = StructuralOptimizer(max_bubble_sweeps=1)
        assert optimizer.bubble_up_wrappers(soup, stats) == 2


class TestEmptyDivPruning:
    def test_removes_empty_sibling(self, optimizer, parse, stats):
        soup = parse("<div><div></div><p>Content</p></div>")
        assert optimizer.remove_empty_divs(soup, stats) == 1
        assert str(soup) == "<div><p>Content</p></div>"
        assert stats.empty_divs_removed == 1

    def test_parent_that_becomes_empty_is_removed(self, optimizer, parse, stats):
        soup = parse("<div><div><div></div></div><p>Content</p></div>")
        assert optimizer.remove_empty_divs(soup, stats) == 2
        assert str(soup) == "<div><p>Content</p></div>"

    def test_whole_empty_chain_collapses(self, optimizer, parse, stats):
        soup = parse("<div> <div> <div></div> </div> </div><p>x</p>")
        assert optimizer.remove_empty_divs(soup, stats) == 3
        assert soup.find("div") is None

    def test_deletion_ceiling(self, parse, stats):
        soup = parse("<div></div>" * 5)
        optimizer = StructuralOptimizer(max_empty_removals=3)
        assert optimizer.remove_empty_divs(soup, stats) == 3
        assert len(soup.find_all("div")) == 2


class TestOptimize:
    def test_nested_empty_pruning_without_bubbling(self, optimizer, parse, stats):
        soup = parse("<div><div><div></div></div><p>Content</p></div>")
        config = CleaningConfig(bubble_up_wrapper_divs=False)
        optimizer.optimize(soup, config, stats)
        assert len(soup.find_all("div")) == 1
        assert stats.empty_divs_removed >= 2
        assert stats.divs_bubbled_up == 0

    def test_bubbling_without_pruning(self, optimizer, parse, stats):
        soup = parse("<div><div><div><p>Content</p></div></div></div>")
        config = CleaningConfig(remove_empty_divs=False)
        optimizer.optimize(soup, config, stats)
        assert stats.divs_bubbled_up > 0
        assert soup.find("p").decode() == "<p>Content</p>"
        assert stats.empty_divs_removed == 0

    def test_bubbling_and_pruning_combine(self, optimizer, parse, stats):
        soup = parse("<div><div></div><div><div><p>x</p></div></div></div>")
        optimizer.optimize(soup, CleaningConfig(), stats)
        assert str(soup) == "<div><p>x</p></div>"
        assert stats.divs_bubbled_up == 2
        assert stats.empty_divs_removed == 1

    def test_both_rewrites_disabled(self, optimizer, parse, stats):
        html = "<div><div></div></div>"
        soup = parse(html)
        config = CleaningConfig(remove_empty_divs=False, bubble_up_wrapper_divs=False)
        optimizer.optimize(soup, config, stats)
        assert str(soup) == html

    def test_result_is_a_fixed_point(self, optimizer, parse, stats):
        soup = parse("<div><div><div></div><div><span>a</span></div></div></div>")
        optimizer.optimize(soup, CleaningConfig(), stats)
        again = parse(str(soup))
        optimizer.optimize(again, CleaningConfig(), CleaningStatistics())
        assert str(again) == str(soup)
