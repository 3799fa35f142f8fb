import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from lxml import etree

from xml_sortorder import MalformedInputTree, TemplateLoadError, templates, utils


class FakeNode:
    """Minimal stand-in for an element whose parent link can be rewired."""

    def __init__(self, tag):
        self.tag = tag
        self.parent = None

    def getparent(self):
        return self.parent


def test_structural_path_of_nested_element():
    root = etree.fromstring('<project><dependencies><dependency/></dependencies></project>')
    dep = root.find('dependencies/dependency')
    assert utils.structural_path(dep) == '/project/dependencies/dependency'
    assert utils.structural_path(root) == '/project'


def test_structural_path_ignores_sibling_index():
    root = etree.fromstring('<a><b><c/></b><b><c/><c/></b></a>')
    paths = {utils.structural_path(c) for c in root.iter('c')}
    assert paths == {'/a/b/c'}


def test_structural_path_strips_namespace():
    root = etree.fromstring('<project xmlns="http://maven.apache.org/POM/4.0.0"><groupId/></project>')
    assert utils.structural_path(root[0]) == '/project/groupId'


def test_structural_path_detects_cycle():
    a = FakeNode('a')
    b = FakeNode('b')
    a.parent = b
    b.parent = a
    with pytest.raises(MalformedInputTree):
        utils.structural_path(a)


def test_structural_path_depth_limit():
    root = etree.Element('n0')
    elem = root
    for i in range(1, 6):
        elem = etree.SubElement(elem, f'n{i}')
    with pytest.raises(MalformedInputTree):
        utils.structural_path(elem, max_depth=5)
    assert utils.structural_path(elem, max_depth=6) == '/n0/n1/n2/n3/n4/n5'


def test_child_text_defaults_to_empty():
    dep = etree.fromstring('<dependency><groupId> org.x </groupId><artifactId/></dependency>')
    assert utils.child_text(dep, 'groupId') == 'org.x'
    assert utils.child_text(dep, 'artifactId') == ''
    assert utils.child_text(dep, 'version') == ''


def test_is_element_and_parent_element():
    root = etree.fromstring('<a><!--c--><b/></a>')
    comment, b = list(root)
    assert not utils.is_element(comment)
    assert utils.is_element(b)
    assert utils.parent_element(b) is root
    assert utils.parent_element(root) is None


def test_detect_encoding():
    assert utils.detect_encoding(b'<?xml version="1.0" encoding="ISO-8859-1"?><a/>') == 'ISO-8859-1'
    assert utils.detect_encoding(b'<a/>') == 'UTF-8'


def test_read_template_uses_declared_encoding(tmp_path):
    path = tmp_path / 'order.xml'
    text = '<?xml version="1.0" encoding="ISO-8859-1"?><project><näme/></project>'
    path.write_bytes(text.encode('iso-8859-1'))
    assert 'näme' in templates.read_template(str(path))


def test_get_template_by_name():
    assert templates.get_template('recommended_2008_06') is templates.DEFAULT_SORT_ORDER
    with pytest.raises(KeyError):
        templates.get_template('missing')


def test_read_template_undecodable_file(tmp_path):
    path = tmp_path / 'order.xml'
    path.write_bytes(b'<?xml version="1.0" encoding="UTF-8"?><project><\xff/></project>')
    with pytest.raises(TemplateLoadError) as info:
        templates.read_template(str(path))
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_read_template_unknown_declared_encoding(tmp_path):
    path = tmp_path / 'order.xml'
    path.write_bytes(b'<?xml version="1.0" encoding="bogus-enc"?><project/>')
    with pytest.raises(TemplateLoadError) as info:
        templates.read_template(str(path))
    assert isinstance(info.value.__cause__, LookupError)
