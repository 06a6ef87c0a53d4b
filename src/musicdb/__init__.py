# ABOUTME: musicdb resolves catalog work codes, tempo, and key for songs by title and artist.
# ABOUTME: The external lookup pipeline lives in musicdb.lookup; local storage in musicdb.db.
