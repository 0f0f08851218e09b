#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Plain-text ``{{ placeholder }}`` template rendering for ticket bodies."""

import re
from typing import Any


PLACEHOLDER_RE = re.compile(r"\{\{\s*([a-zA-Z0-9_]+)\s*\}\}")


def render_template(template: str, values: dict[str, Any], *, missing: str = "") -> str:
    """Replace ``{{ key }}`` placeholders in *template* with values from *values*.

    Keys that are absent or ``None`` render as *missing*.
    """
    def repl(match: re.Match[str]) -> str:
        v = values.get(match.group(1))
        if v is None:
            return missing
        return str(v)

    return PLACEHOLDER_RE.sub(repl, template)
