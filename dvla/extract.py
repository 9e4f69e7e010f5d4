from __future__ import annotations
"""Interpreter for the rules in ``dvla.layout``.

Every function takes a BeautifulSoup scope and a rule and returns a plain
``{field: text}`` mapping, raising the matching ``DvlaError`` when a
required rule finds nothing.
"""
from typing import Dict, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import ContinuationNotFoundError, DetailsNotFoundError, MalformedItemError, ParseError
from .layout import FormRule, ListRule, PageLayout, SectionRule, ValueRule
from .logger import Logger

log = Logger.bind(__name__)


def parse_document(html: str) -> BeautifulSoup:
    if html is None or not html.strip():
        raise ParseError("empty response body")
    try:
        soup = BeautifulSoup(html, 'lxml')
    except Exception as e:  # noqa: BLE001
        raise ParseError(f"markup parse fail error={e}") from e
    if soup.find() is None:
        raise ParseError("response body holds no markup elements")
    return soup


def extract_form(scope: Tag, rule: FormRule) -> Dict[str, str]:
    form = None
    for candidate in scope.find_all('form'):
        if candidate.get('action') == rule.action:
            form = candidate
            break
    if form is None:
        log.debug(f"no form with action={rule.action}")
        if rule.required:
            raise ContinuationNotFoundError(missing=('form', ))
        return {}
    wanted = dict(rule.inputs)
    out: Dict[str, str] = {}
    for inp in form.find_all('input'):
        ident = inp.get('id')
        if ident in wanted:
            out[wanted[ident]] = inp.get('value', '')
    missing = tuple(ident for ident, name in rule.inputs if not out.get(name))
    if missing and rule.required:
        raise ContinuationNotFoundError(missing=missing)
    return out


def extract_value(scope: Tag, rule: ValueRule) -> Optional[str]:
    """Trimmed text of the single match, or None unless exactly one element matches."""
    found = scope.select(rule.selector)
    if len(found) != 1:
        if rule.required:
            raise DetailsNotFoundError(f"expected one {rule.selector} found={len(found)}")
        return None
    text = found[0].get_text().strip()
    if rule.strip_prefix:
        text = text.replace(rule.strip_prefix, '', 1).strip()
    return text


def extract_section(scope: Tag, rule: SectionRule) -> Dict[str, str]:
    out: Dict[str, str] = {}
    matched = 0
    for container in scope.select(rule.container):
        if rule.marker not in container.get_text():
            continue
        matched += 1
        for value_rule in rule.values:
            value = extract_value(container, value_rule)
            if value is not None:
                out[value_rule.field] = value
    if matched > 1:
        log.debug(f"section {rule.container} matched={matched}, keeping last")
    if not matched and rule.required:
        raise DetailsNotFoundError(f"no {rule.container} containing {rule.marker!r}")
    return out


def extract_list(scope: Tag, rule: ListRule) -> Dict[str, str]:
    container = scope.select_one(rule.container)
    if container is None:
        if rule.required:
            raise DetailsNotFoundError()
        return {}
    out: Dict[str, str] = {}
    for index, item in enumerate(container.select(rule.item)):
        values = item.select(rule.value)
        if len(values) != 1:
            raise MalformedItemError(index, len(values))
        text = item.get_text()
        for label in rule.labels:
            if label.label in text:
                out[label.field] = values[0].get_text().strip()
                break
        else:
            log.debug(f"unmatched item index={index} text={text.strip()[:40]!r}")
    return out


def extract_page(soup: BeautifulSoup, layout: PageLayout) -> Dict[str, str]:
    region = soup.select_one(layout.region)
    if region is None:
        log.warn(f"region {layout.region} not found")
        if any(r.required for r in layout.lists):
            raise DetailsNotFoundError(f"vehicle details not found (no {layout.region} region)")
        return {}
    out: Dict[str, str] = {}
    for value_rule in layout.values:
        value = extract_value(region, value_rule)
        if value is not None:
            out[value_rule.field] = value
    for section_rule in layout.sections:
        out.update(extract_section(region, section_rule))
    for list_rule in layout.lists:
        out.update(extract_list(region, list_rule))
    return out


__all__ = ["parse_document", "extract_form", "extract_value", "extract_section", "extract_list", "extract_page"]
