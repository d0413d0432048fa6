# Controllers package initialization
# Flask blueprints exposing the lessons as read-only JSON
