from hypothesis import strategies as st

from frameforge_contracts.models.orm import JobStatus

usernames = st.from_regex(r"[A-Za-z0-9_]{3,50}", fullmatch=True)

emails = st.builds(
    lambda local, domain, tld: f"{local}@{domain}.{tld}",
    st.from_regex(r"[a-z0-9]{1,20}", fullmatch=True),
    st.from_regex(r"[a-z]{2,15}", fullmatch=True),
    st.sampled_from(["com", "org", "net", "io"]),
)

filenames = st.from_regex(r"[A-Za-z0-9_-]{1,40}\.(mp4|avi|mov|mkv|webm)", fullmatch=True)

video_urls = st.builds(
    lambda key: f"https://frameforge-videos.s3.amazonaws.com/uploads/{key}",
    st.from_regex(r"[a-z0-9]{1,32}\.mp4", fullmatch=True),
)

job_statuses = st.sampled_from(list(JobStatus))

invalid_statuses = st.from_regex(r"[A-Za-z_ ]{1,20}", fullmatch=True).filter(
    lambda s: s not in {status.value for status in JobStatus}
)
