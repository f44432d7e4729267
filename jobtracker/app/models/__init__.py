from jobtracker.app.models.job import Job, JobStatus
from jobtracker.app.models.attachment import Attachment
