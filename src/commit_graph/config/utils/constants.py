# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

DEFAULT_PATH_FILE_NAME = "path.txt"
PATH_SEPARATOR = " -> "

COMMIT_MESSAGE_TEMPLATE = "Commit {id}"
TAG_NAME_TEMPLATE = "tag-{id}"

# Resource caps applied before generation starts
DEFAULT_MAX_COMMITS = 100_000
DEFAULT_MAX_DEPTH = 1_000

