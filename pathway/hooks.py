app_name = "pathway"
app_title = "Pathway"
app_publisher = "pathway"
app_description = "Learning-path progression and gamification"
app_email = "dev@pathway.dev"
app_license = "mit"

# Apps
# ------------------

# required_apps = []

# Installation
# ------------

# DocTypes are created programmatically from pathway.services.schema
after_migrate = [
	"pathway.services.schema.migration_runner.run_migration"
]

# Document Events
# ---------------
# Hook on document methods and events

doc_events = {
	# LEARNING PROGRESS
	# =================
	# Every completion save re-derives earned reasons; awarding is idempotent
	"Content Completion": {
		# on_update: Runs after insert and after every later save
		"on_update": "pathway.services.gamification.completion_events.on_content_completion_update"
	}
}

# Scheduled Tasks
# ---------------

# scheduler_events = {
# 	"daily": [
# 		"pathway.tasks.daily"
# 	],
# }

# Testing
# -------

# before_tests = "pathway.install.before_tests"
