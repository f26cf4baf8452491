# Models package — prefer importing from the specific submodule
# (e.g. privacy_grade.models.tracking).
