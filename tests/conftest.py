"""
Shared fixtures for the XML task tests.
"""

import pytest


BOOKS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<catalog>
  <book id="b1" lang="en">
    <title>Dune</title>
    <price>9.99</price>
  </book>
  <book id="b2" lang="fi">
    <title>Seitsemän veljestä</title>
    <price>12.50</price>
  </book>
</catalog>
"""

NAMESPACED_XML = """<inv:invoice xmlns:inv="urn:example:invoice" xmlns="urn:example:default">
  <inv:line>
    <amount>10</amount>
  </inv:line>
  <inv:line>
    <amount>32</amount>
  </inv:line>
</inv:invoice>
"""

ORDER_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:element name="order">
    <xs:complexType>
      <xs:sequence>
        <xs:element name="id" type="xs:integer"/>
        <xs:element name="customer" type="xs:string"/>
      </xs:sequence>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""

VALID_ORDER = "<order><id>42</id><customer>ACME</customer></order>"

# two violations: bad integer, then a missing customer element
INVALID_ORDER = "<order><id>forty-two</id></order>"

IDENTITY_XSLT = """<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform">
  <xsl:template match="/">
    <xsl:copy-of select="."/>
  </xsl:template>
</xsl:stylesheet>
"""


@pytest.fixture
def books_xml():
    return BOOKS_XML


@pytest.fixture
def namespaced_xml():
    return NAMESPACED_XML


@pytest.fixture
def order_xsd():
    return ORDER_XSD


@pytest.fixture
def valid_order():
    return VALID_ORDER


@pytest.fixture
def invalid_order():
    return INVALID_ORDER


@pytest.fixture
def identity_xslt():
    return IDENTITY_XSLT
