"""Tests for the form element primitives."""

from __future__ import annotations

from markupsafe import Markup

from formfor import primitives


class TestAutoId:
    def test_flattens_brackets(self):
        assert primitives.auto_id("order[items][1][price]") == "order_items_1_price"

    def test_plain_name(self):
        assert primitives.auto_id("email") == "email"

    def test_trailing_empty_brackets(self):
        assert primitives.auto_id("tags[]") == "tags"


class TestFormTags:
    def test_open_defaults_to_post(self):
        assert primitives.open("/orders") == '<form action="/orders" method="post">'

    def test_open_attributes_override(self):
        html = primitives.open("/orders", {"method": "get", "class": "search"})
        assert html == '<form action="/orders" method="get" class="search">'

    def test_open_without_action(self):
        assert primitives.open(None) == '<form action="" method="post">'

    def test_close(self):
        assert primitives.close() == "</form>"


class TestInputs:
    def test_text(self):
        html = primitives.text("order[total]", 5)
        assert html == '<input type="text" name="order[total]" id="order_total" value="5">'

    def test_text_escapes_value(self):
        html = primitives.text("a", '"><script>')
        assert "<script>" not in html
        assert 'value="&#34;&gt;&lt;script&gt;"' in html

    def test_none_value_omitted(self):
        assert primitives.text("a", None) == '<input type="text" name="a" id="a">'

    def test_attributes_can_override_id(self):
        html = primitives.hidden("a", "1", {"id": "custom"})
        assert html == '<input type="hidden" name="a" id="custom" value="1">'

    def test_password(self):
        assert primitives.password("p") == '<input type="password" name="p" id="p">'

    def test_text_area(self):
        html = primitives.text_area("post[body]", "<hi>", {"rows": 3})
        assert html == '<textarea name="post[body]" id="post_body" rows="3">&lt;hi&gt;</textarea>'

    def test_label(self):
        html = primitives.label("Total", "order[total]")
        assert html == '<label for="order_total" id="order_total_label">Total</label>'

    def test_label_can_drop_for_and_id(self):
        assert primitives.label("Status", "s", {"for": False, "id": False}) == "<label>Status</label>"

    def test_button(self):
        html = primitives.button("order[kind]", "Go", {"class": "btn"})
        assert html == '<button type="button" name="order[kind]" id="order_kind" class="btn">Go</button>'


class TestCheckBox:
    def test_hidden_field_comes_first(self):
        html = primitives.check_box("user[agree]", "1")
        assert html == (
            '<input type="hidden" name="user[agree]" value="0">'
            '<input type="checkbox" name="user[agree]" id="user_agree" value="1" checked>'
        )

    def test_unchecked(self):
        html = primitives.check_box("user[agree]", "0")
        assert "checked" not in html

    def test_bool_value(self):
        assert "checked" in primitives.check_box("a", True)
        assert "checked" not in primitives.check_box("a", False)

    def test_without_hidden(self):
        html = primitives.check_box("a", None, with_hidden=False)
        assert 'type="hidden"' not in html

    def test_split(self):
        hidden, box = primitives.check_box("a", 1, split=True)
        assert hidden == '<input type="hidden" name="a" value="0">'
        assert box.startswith('<input type="checkbox"')
        assert isinstance(hidden, Markup)


class TestChoices:
    def test_radio(self):
        html = primitives.radio("o[status]", "open", True)
        assert html == '<input type="radio" name="o[status]" id="o_status_open" value="open" checked>'

    def test_collection_radios(self):
        html = primitives.collection_radios(
            "o[status]", {"open": "Open", "closed": "Closed"}, "closed", {"class": "radio"}
        )
        assert html == (
            '<label class="radio"><input type="radio" name="o[status]" id="o_status_open" value="open"> Open</label>'
            '<label class="radio"><input type="radio" name="o[status]" id="o_status_closed" value="closed" checked> Closed</label>'
        )

    def test_collection_check_boxes_as_list(self):
        items = primitives.collection_check_boxes("u[roles]", {1: "Admin", 2: "Editor"}, [2], as_list=True)
        assert len(items) == 2
        assert 'name="u[roles][]"' in items[0]
        assert "checked" not in items[0]
        assert "checked" in items[1]

    def test_collection_escapes_text(self):
        html = primitives.collection_check_boxes("a", {1: "<b>"})
        assert "&lt;b&gt;" in html

    def test_select(self):
        html = primitives.select("o[size]", {"s": "Small", "l": "Large"}, "l")
        assert html == (
            '<select name="o[size]" id="o_size">'
            '<option value="s">Small</option>'
            '<option value="l" selected>Large</option>'
            "</select>"
        )

    def test_select_matches_numbers_as_strings(self):
        html = primitives.select("n", {1: "One", 2: "Two"}, "2")
        assert '<option value="2" selected>Two</option>' in html

    def test_select_optgroups(self):
        html = primitives.select("car", {"Swedish": {"volvo": "Volvo"}})
        assert '<optgroup label="Swedish"><option value="volvo">Volvo</option></optgroup>' in html
