#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""体用五行关系单元测试"""

from itertools import product

import pytest

from qiduweng.calculators.element_relations import (
    Relationship,
    classify_relationship,
    get_controlled_element,
    get_generated_element,
)
from qiduweng.data.constants import ELEMENT_RELATIONS, FIVE_ELEMENTS
from qiduweng.exceptions import InternalInvariantError, InvalidElementError


class TestRelationTable:
    def test_cycle(self):
        assert [get_generated_element(e) for e in FIVE_ELEMENTS] == ['火', '土', '金', '水', '木']
        assert [get_controlled_element(e) for e in FIVE_ELEMENTS] == ['土', '金', '水', '木', '火']

    def test_read_only(self):
        with pytest.raises(TypeError):
            ELEMENT_RELATIONS['木'] = {'generates': '木', 'controls': '木'}

    def test_unknown_element(self):
        with pytest.raises(InvalidElementError):
            get_generated_element('风')


class TestClassify:
    def test_same(self):
        assert classify_relationship('木', '木') == Relationship.MUTUAL_HARMONY

    def test_body_controls_use(self):
        assert classify_relationship('土', '水') == Relationship.BODY_CONTROLS_USE

    def test_use_controls_body(self):
        assert classify_relationship('金', '火') == Relationship.USE_CONTROLS_BODY

    def test_body_generates_use(self):
        assert classify_relationship('土', '金') == Relationship.BODY_GENERATES_USE

    def test_use_generates_body(self):
        assert classify_relationship('木', '水') == Relationship.USE_GENERATES_BODY

    def test_enum_compares_with_label(self):
        assert Relationship.BODY_CONTROLS_USE == '体克用'

    @pytest.mark.parametrize("body,use", list(product(FIVE_ELEMENTS, FIVE_ELEMENTS)))
    def test_every_pair_exactly_one(self, body, use):
        matches = [
            body == use,
            ELEMENT_RELATIONS[body]['controls'] == use,
            ELEMENT_RELATIONS[use]['controls'] == body,
            ELEMENT_RELATIONS[body]['generates'] == use,
            ELEMENT_RELATIONS[use]['generates'] == body,
        ]
        assert matches.count(True) == 1
        assert isinstance(classify_relationship(body, use), Relationship)

    def test_each_relationship_reachable(self):
        found = {classify_relationship(b, u) for b, u in product(FIVE_ELEMENTS, FIVE_ELEMENTS)}
        assert found == set(Relationship)

    def test_unknown_element(self):
        with pytest.raises(InvalidElementError):
            classify_relationship('风', '木')
        with pytest.raises(InvalidElementError):
            classify_relationship('风', '风')

    def test_inconsistent_table(self):
        broken = {e: {'generates': e, 'controls': e} for e in FIVE_ELEMENTS}
        with pytest.raises(InternalInvariantError):
            classify_relationship('木', '火', broken)
