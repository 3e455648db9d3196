"""
Heuristic technology detection from a repository's file names and package.json dependencies.
"""
from typing import Any, Dict, Iterable, List, Optional

from Analyzer.Model.PackageDetails import PackageDetails
from Analyzer.Utility.TechnologyRules import DEFAULT_TECHNOLOGY_RULES


def _rule_matches(rule: Dict[str, Any], names: List[str]) -> bool:
    exact = rule.get("names", [])
    contains = rule.get("contains", [])
    suffixes = tuple(rule.get("suffixes", []))
    for name in names:
        if name in exact:
            return True
        if any(keyword in name for keyword in contains):
            return True
        if suffixes and name.endswith(suffixes):
            return True
    return False


def unique_labels(labels: Iterable[str]) -> List[str]:
    """Deduplicate labels case-insensitively, keeping the first spelling, and sort them."""
    seen = set()
    result = []
    for label in labels:
        key = label.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(label)
    return sorted(result)


def detect_technologies(file_names: Iterable[str], package_details: Optional[PackageDetails] = None,
                        rules: Optional[List[Dict[str, Any]]] = None) -> List[str]:
    names = [name.lower() for name in file_names if name]
    labels = [rule["label"] for rule in (rules or DEFAULT_TECHNOLOGY_RULES) if _rule_matches(rule, names)]
    if package_details is not None:
        # package names double as technology labels
        labels.extend(package_details.names())
    return unique_labels(labels)
