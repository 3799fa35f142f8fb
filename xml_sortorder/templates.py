"""Embedded sort order templates.

A template is an ordinary XML document whose element order is the wanted
order.  Only element names and nesting matter; text, attributes and comments
are ignored by :func:`~xml_sortorder.order_table.build_order_table`.
"""

from __future__ import annotations

import logging
from typing import Dict

from . import utils
from .errors import TemplateLoadError

logger = logging.getLogger("xml_sortorder")

_DEPENDENCY = """
        <dependency>
          <groupId/>
          <artifactId/>
          <version/>
          <type/>
          <classifier/>
          <scope/>
          <systemPath/>
          <exclusions>
            <exclusion>
              <groupId/>
              <artifactId/>
            </exclusion>
          </exclusions>
          <optional/>
        </dependency>"""

_PLUGIN = """
          <plugin>
            <groupId/>
            <artifactId/>
            <version/>
            <extensions/>
            <executions>
              <execution>
                <id/>
                <phase/>
                <goals>
                  <goal/>
                </goals>
                <inherited/>
                <configuration/>
              </execution>
            </executions>
            <dependencies>""" + _DEPENDENCY + """
            </dependencies>
            <goals/>
            <inherited/>
            <configuration/>
          </plugin>"""

# Element order recommended by the Maven POM code convention.
RECOMMENDED_2008_06 = """<?xml version="1.0" encoding="UTF-8"?>
<project>
  <modelVersion/>
  <parent>
    <groupId/>
    <artifactId/>
    <version/>
    <relativePath/>
  </parent>
  <groupId/>
  <artifactId/>
  <version/>
  <packaging/>
  <name/>
  <description/>
  <url/>
  <inceptionYear/>
  <organization>
    <name/>
    <url/>
  </organization>
  <licenses>
    <license>
      <name/>
      <url/>
      <distribution/>
      <comments/>
    </license>
  </licenses>
  <developers>
    <developer>
      <id/>
      <name/>
      <email/>
      <url/>
      <organization/>
      <organizationUrl/>
      <roles/>
      <timezone/>
      <properties/>
    </developer>
  </developers>
  <contributors>
    <contributor>
      <name/>
      <email/>
      <url/>
      <organization/>
      <organizationUrl/>
      <roles/>
      <timezone/>
      <properties/>
    </contributor>
  </contributors>
  <mailingLists/>
  <prerequisites>
    <maven/>
  </prerequisites>
  <modules>
    <module/>
  </modules>
  <scm>
    <connection/>
    <developerConnection/>
    <tag/>
    <url/>
  </scm>
  <issueManagement>
    <system/>
    <url/>
  </issueManagement>
  <ciManagement>
    <system/>
    <url/>
    <notifiers/>
  </ciManagement>
  <distributionManagement/>
  <properties/>
  <dependencyManagement>
    <dependencies>""" + _DEPENDENCY + """
    </dependencies>
  </dependencyManagement>
  <dependencies>""" + _DEPENDENCY + """
  </dependencies>
  <repositories/>
  <pluginRepositories/>
  <build>
    <defaultGoal/>
    <directory/>
    <finalName/>
    <sourceDirectory/>
    <scriptSourceDirectory/>
    <testSourceDirectory/>
    <outputDirectory/>
    <testOutputDirectory/>
    <extensions/>
    <resources/>
    <testResources/>
    <filters/>
    <pluginManagement>
      <plugins>""" + _PLUGIN + """
      </plugins>
    </pluginManagement>
    <plugins>""" + _PLUGIN + """
    </plugins>
  </build>
  <reporting/>
  <profiles/>
</project>
"""

# Element order of the Maven 4.0.0 model reference, grouped as in the model.
DEFAULT_1_0_0 = """<?xml version="1.0" encoding="UTF-8"?>
<project>
  <modelVersion/>
  <groupId/>
  <artifactId/>
  <version/>
  <packaging/>
  <name/>
  <description/>
  <url/>
  <parent/>
  <prerequisites/>
  <issueManagement/>
  <ciManagement/>
  <inceptionYear/>
  <mailingLists/>
  <developers/>
  <contributors/>
  <licenses/>
  <scm/>
  <organization/>
  <build>
    <sourceDirectory/>
    <scriptSourceDirectory/>
    <testSourceDirectory/>
    <outputDirectory/>
    <testOutputDirectory/>
    <extensions/>
    <defaultGoal/>
    <resources/>
    <testResources/>
    <directory/>
    <finalName/>
    <filters/>
    <pluginManagement>
      <plugins>""" + _PLUGIN + """
      </plugins>
    </pluginManagement>
    <plugins>""" + _PLUGIN + """
    </plugins>
  </build>
  <profiles/>
  <modules/>
  <repositories/>
  <pluginRepositories/>
  <dependencies>""" + _DEPENDENCY + """
  </dependencies>
  <reporting/>
  <dependencyManagement>
    <dependencies>""" + _DEPENDENCY + """
    </dependencies>
  </dependencyManagement>
  <distributionManagement/>
  <properties/>
</project>
"""

TEMPLATES: Dict[str, str] = {
    "recommended_2008_06": RECOMMENDED_2008_06,
    "default_1_0_0": DEFAULT_1_0_0,
}

DEFAULT_SORT_ORDER = RECOMMENDED_2008_06


def get_template(name: str) -> str:
    """Return an embedded template by name.

    :param name: One of the keys of :data:`TEMPLATES`.
    :returns: The template XML text.
    :raises KeyError: For an unknown template name.
    """
    try:
        return TEMPLATES[name]
    except KeyError:
        raise KeyError(
            f"Unknown sort order {name!r}, expected one of {sorted(TEMPLATES)}"
        ) from None


def read_template(path: str) -> str:
    """Read a custom template from disk.

    The file is decoded with the encoding declared in its XML header, falling
    back to the configured default.

    :param path: Location of the template file.
    :returns: The decoded template text.
    :raises TemplateLoadError: When the file cannot be decoded.
    """
    with open(path, "rb") as f:
        data = f.read()
    try:
        return data.decode(utils.detect_encoding(data))
    except (UnicodeError, LookupError) as exc:
        logger.error("Sort order template %s could not be decoded: %s", path, exc)
        raise TemplateLoadError(f"Invalid sort order template {path}: {exc}") from exc
