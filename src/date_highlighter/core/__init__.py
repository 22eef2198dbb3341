"""Date matching, age buckets and the two highlighting passes.

Nothing here imports Textual, rich or the file system; hosts talk to it
through the protocols in ``ports``.
"""
