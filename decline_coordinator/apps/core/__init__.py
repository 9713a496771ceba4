""" Core app: pieces shared by every Decline Coordinator app. """
