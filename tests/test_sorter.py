import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import logging

import pytest
from lxml import etree

from xml_sortorder import SortSettings, WrapperFactory, sort_document, sort_element

POM_NS = 'http://maven.apache.org/POM/4.0.0'

UNSORTED_POM = '''<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <dependencies>
    <dependency>
      <artifactId>y</artifactId>
      <groupId>b</groupId>
    </dependency>
    <dependency>
      <groupId>a</groupId>
      <artifactId>z</artifactId>
    </dependency>
  </dependencies>
  <custom>keep</custom>
  <version>1.0</version>
  <!-- coordinates -->
  <groupId>org.example</groupId>
  <artifactId>demo</artifactId>
  <modelVersion>4.0.0</modelVersion>
</project>
'''


def child_names(elem):
    return [etree.QName(c).localname if isinstance(c.tag, str) else 'comment' for c in elem]


def test_sort_document_orders_project_children():
    factory = WrapperFactory.from_template()
    tree = sort_document(UNSORTED_POM, factory)
    root = tree.getroot()
    assert child_names(root) == [
        'modelVersion', 'comment', 'groupId', 'artifactId', 'version', 'dependencies', 'custom',
    ]


def test_sort_document_orders_dependency_children():
    factory = WrapperFactory.from_template()
    root = sort_document(UNSORTED_POM, factory).getroot()
    first = root.find(f'{{{POM_NS}}}dependencies/{{{POM_NS}}}dependency')
    assert child_names(first) == ['groupId', 'artifactId']


def test_dependencies_keep_order_without_flag():
    factory = WrapperFactory.from_template(settings=SortSettings())
    root = sort_document(UNSORTED_POM.encode('utf-8'), factory).getroot()
    groups = [d.findtext(f'{{{POM_NS}}}groupId') for d in root.iter(f'{{{POM_NS}}}dependency')]
    assert groups == ['b', 'a']


def test_dependencies_sorted_by_group_and_artifact():
    factory = WrapperFactory.from_template(settings=SortSettings(sort_dependencies=True))
    root = sort_document(UNSORTED_POM, factory).getroot()
    groups = [d.findtext(f'{{{POM_NS}}}groupId') for d in root.iter(f'{{{POM_NS}}}dependency')]
    assert groups == ['a', 'b']


def test_sorting_twice_is_stable():
    factory = WrapperFactory.from_template(settings=SortSettings(True, True))
    once = etree.tostring(sort_document(UNSORTED_POM, factory))
    twice = etree.tostring(sort_document(once, factory))
    assert once == twice


def test_sort_element_keeps_unknown_subtrees():
    factory = WrapperFactory.from_template()
    root = etree.fromstring('<project><build><plugins><plugin><configuration>'
                            '<z/><a/></configuration></plugin></plugins></build></project>')
    sort_element(root, factory)
    assert child_names(root.find('build/plugins/plugin/configuration')) == ['z', 'a']


def test_custom_template():
    factory = WrapperFactory.from_template('<doc><title/><body/></doc>')
    root = sort_document('<doc><body/><title/></doc>', factory).getroot()
    assert child_names(root) == ['title', 'body']


def test_malformed_input_propagates():
    factory = WrapperFactory.from_template()
    with pytest.raises(etree.XMLSyntaxError):
        sort_document('<project><groupId></project>', factory)


def test_comments_are_not_counted_as_unsorted(caplog):
    factory = WrapperFactory.from_template()
    caplog.set_level(logging.INFO, logger='xml_sortorder')
    sort_document(UNSORTED_POM, factory)
    messages = [r.getMessage() for r in caplog.records]
    # only <custom> lacks a priority; the comment is not an element
    assert 'Nodes without priority: 1' in messages
