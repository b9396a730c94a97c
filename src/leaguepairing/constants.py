# League Pairing
# Copyright (C) 2025  League Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_STORE_FILE = f"tournaments{SAVE_FILE_EXTENSION}"
STORE_ENV_VAR = "LEAGUE_PAIRING_STORE"
STORE_FORMAT_VERSION = 1

# Match outcome points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Tournament formats
FORMAT_SINGLE = "single"
FORMAT_DOUBLE = "double"
FORMATS = (FORMAT_SINGLE, FORMAT_DOUBLE)
DEFAULT_FORMAT = FORMAT_SINGLE

# Number of full round-robin cycles played in each format
CYCLES_PER_FORMAT = {
    FORMAT_SINGLE: 1,
    FORMAT_DOUBLE: 2,
}

FORMAT_NAMES = {
    FORMAT_SINGLE: "Single Round Robin",
    FORMAT_DOUBLE: "Double Round Robin",
}

# Fixture status values (for display and serialization)
STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"

# Smallest field a round robin can be played with
MIN_PARTICIPANTS = 2

# Default participant palette, handed out in order when no colour is given
DEFAULT_COLORS = [
    "#f97316",
    "#3b82f6",
    "#22c55e",
    "#6b7280",
    "#8b5cf6",
    "#f59e0b",
]

# Placeholder shown instead of a score for fixtures still to be played
PENDING_RESULT_DISPLAY = "vs"

# Standings table column headers, in display order
STANDINGS_COLUMNS = ["Pos", "Team", "P", "W", "D", "L", "GF", "GA", "GD", "Pts"]

# Days between rounds when kick-off dates are assigned without an interval
DEFAULT_ROUND_INTERVAL_DAYS = 7
