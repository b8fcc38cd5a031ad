"""
Fish profiles: `/fish` endpoints and the `fish_profiles` table.
"""
