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

"""Domain constants – defaults, event names and PR actions."""

DEFAULT_LABEL_PATTERN = r"- \[(.*?)\] ?`(.+?)`"
DEFAULT_LABEL_MISSING = "label-missing"
DEFAULT_LABEL_GUIDE_URL = "https://docs.google.com/document/d/1Qw7LHQdXWBW9t2-r-A7QdFDBwmZh6ytB4guwMoXHqc0"

CHECKED_MARK = "x"
CHECKBOX_LINE = "- [{mark}] `{name}`"
BODY_LINE_SEP = "\r\n"

EVENT_ISSUES = "issues"
EVENT_PULL_REQUEST = "pull_request"
EVENT_PULL_REQUEST_TARGET = "pull_request_target"
PULL_REQUEST_EVENTS = frozenset({EVENT_PULL_REQUEST, EVENT_PULL_REQUEST_TARGET})

ACTION_OPENED = "opened"
ACTION_EDITED = "edited"
ACTION_LABELED = "labeled"
ACTION_UNLABELED = "unlabeled"
