# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Résumé Model

The structured content Folio lays out: contact details plus a list of
experience entries, loaded from a JSON file such as:

    {
      "Name": "Jane Doe",
      "Trade": "Software Engineer",
      "Tel": "+1 555 0100",
      "Email": "jane@example.com",
      "Experience": [
        {
          "Name": "Example Corp",
          "URL": "https://example.com",
          "Since": "2019",
          "Ended": "2023",
          "Technologies": ["Python", "PostgreSQL"],
          "Summary": "Built things."
        }
      ]
    }

Keys are matched case-insensitively. ``Ended`` is optional; everything else
is required.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .error import ResumeError
from .obfuscation import ObfsCipher


def _lower_keys(data: Any, what: str) -> dict:
    if not isinstance(data, Mapping):
        raise ResumeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return {str(k).lower(): v for k, v in data.items()}


def _get_str(data: dict, key: str, what: str, required: bool = True) -> str:
    if key not in data or data[key] is None:
        if required:
            raise ResumeError(f"{what} is missing required field {key!r}")
        return ""
    value = data[key]
    if not isinstance(value, str):
        raise ResumeError(f"{what} field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Experience:
    """One position or project on the résumé."""
    name: str
    url: str
    since: str
    summary: str
    ended: str = ""
    technologies: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, index: int = 0) -> 'Experience':
        what = f"experience entry {index}"
        d = _lower_keys(data, what)
        technologies = d.get("technologies") or []
        if not isinstance(technologies, list) or not all(isinstance(t, str) for t in technologies):
            raise ResumeError(f"{what} field 'technologies' must be a list of strings")
        return cls(
            name=_get_str(d, "name", what),
            url=_get_str(d, "url", what, required=False),
            since=_get_str(d, "since", what),
            summary=_get_str(d, "summary", what),
            ended=_get_str(d, "ended", what, required=False),
            technologies=list(technologies),
        )

    def to_dict(self) -> dict:
        d = {
            "Name": self.name,
            "URL": self.url,
            "Since": self.since,
        }
        if self.ended:
            d["Ended"] = self.ended
        d["Technologies"] = list(self.technologies)
        d["Summary"] = self.summary
        return d

    def timeline(self) -> str:
        """Human readable period, e.g. 'Since 2019' or 'From 2019 until 2023'."""
        if self.ended:
            return f"From {self.since} until {self.ended}"
        return f"Since {self.since}"


@dataclass
class Resume:
    """Contact details and experience entries."""
    name: str
    trade: str
    tel: str
    email: str
    experience: list[Experience] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'Resume':
        d = _lower_keys(data, "résumé")
        entries = d.get("experience") or []
        if not isinstance(entries, list):
            raise ResumeError("résumé field 'experience' must be a list")
        return cls(
            name=_get_str(d, "name", "résumé"),
            trade=_get_str(d, "trade", "résumé"),
            tel=_get_str(d, "tel", "résumé"),
            email=_get_str(d, "email", "résumé"),
            experience=[Experience.from_dict(e, i) for i, e in enumerate(entries)],
        )

    def to_dict(self) -> dict:
        return {
            "Name": self.name,
            "Trade": self.trade,
            "Tel": self.tel,
            "Email": self.email,
            "Experience": [e.to_dict() for e in self.experience],
        }

    def obfuscate(self, passphrase: str) -> 'Resume':
        """Return a copy with every string field passed through the cipher.

        The transform is its own inverse: obfuscating an obfuscated résumé
        with the same passphrase restores it.
        """
        c = ObfsCipher(passphrase)
        pad = c.pad_str
        return Resume(
            name=pad(self.name),
            trade=pad(self.trade),
            tel=pad(self.tel),
            email=pad(self.email),
            experience=[
                replace(
                    e,
                    name=pad(e.name),
                    url=pad(e.url),
                    since=pad(e.since),
                    ended=pad(e.ended),
                    technologies=[pad(t) for t in e.technologies],
                    summary=pad(e.summary),
                )
                for e in self.experience
            ],
        )


def load_resume(file_path: str) -> Resume:
    """Read a résumé JSON file.

    Raises:
        OSError: If the file cannot be read.
        ResumeError: If the file is not valid JSON or has the wrong shape.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ResumeError(f"Error decoding {file_path}: {exc}") from exc
    return Resume.from_dict(data)


def save_resume(resume: Resume, file_path: str) -> None:
    """Write a résumé as JSON (non-ASCII and escaped bytes as \\u escapes)."""
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(resume.to_dict(), f, indent=2)
        f.write("\n")
