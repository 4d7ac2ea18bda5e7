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


"""Checklist-driven PR label automation.

Modules
-------
constants       Defaults, event names and pull-request actions.
config          Immutable ``ActionConfig`` built from the environment.
events          GitHub event context loading and ``PullRequestEvent`` decoding.
extractor       Checklist parsing (``- [x] `label``` -> label / checked).
policy          Add / remove planning, single-selection and missing-label rules.
body_sync       Checklist write-back after labels were changed directly.
templates       Author-directed comment templates.
dispatcher      Event routing and label-store calls.
"""
