# Services package.
#
#   comment_service  — validation, cache-aside reads and outcome mapping
#                      for the Comment resource
#
# A service is built around a ``CommentStore`` instance (see app.stores)
# supplied by the ``get_comment_service`` dependency, so the router layer
# decides which backend and which session a request uses.
