"""
Tests for job search query composition.

Covers:
- Predicate building per filter
- Active-only gate
- Ordering and pagination
- Company join
"""

import pytest
from app.crud import job_search
from app.schemas.job import JobSearchParams


def titles(jobs):
    return [job.title for job in jobs]


class TestBuildJobPredicates:
    """Unit tests for the pure predicate builder"""

    def test_no_filters_only_active_gate(self):
        predicates = job_search.build_job_predicates()
        assert len(predicates) == 1
        assert "is_active" in str(predicates[0])

    def test_default_params_only_active_gate(self):
        predicates = job_search.build_job_predicates(JobSearchParams())
        assert len(predicates) == 1

    def test_one_predicate_per_supplied_filter(self):
        filters = JobSearchParams(
            search="python",
            location="berlin",
            type="full-time",
            experience_level="senior",
            salary_min=50000,
            salary_max=90000,
        )
        predicates = job_search.build_job_predicates(filters)

        assert len(predicates) == 7
        assert "is_active" in str(predicates[0])
        assert "title" in str(predicates[1]) and "description" in str(predicates[1])
        assert "location" in str(predicates[2])
        assert "jobs.type" in str(predicates[3])
        assert "experience_level" in str(predicates[4])
        assert "salary_min" in str(predicates[5])
        assert "salary_max" in str(predicates[6])

    def test_zero_salary_bound_is_a_filter(self):
        predicates = job_search.build_job_predicates(JobSearchParams(salary_min=0))
        assert len(predicates) == 2

    def test_limit_and_offset_are_not_predicates(self):
        predicates = job_search.build_job_predicates(JobSearchParams(limit=5, offset=10))
        assert len(predicates) == 1


class TestSearchJobs:
    """Behaviour of the listing query against a real database"""

    def test_only_active_jobs_returned(self, db_session, make_job):
        make_job("Visible", days=1)
        make_job("Hidden", days=2, is_active=False)

        results = job_search.search_jobs(db_session)

        assert titles(results) == ["Visible"]
        assert all(job.is_active for job in results)

    def test_search_matches_title_or_description_case_insensitive(self, db_session, make_job):
        make_job("Senior PYTHON Developer", days=1)
        make_job("Data Analyst", days=2, description="Heavy use of Python notebooks")
        make_job("Designer", days=3, description="Figma all day")

        results = job_search.search_jobs(db_session, JobSearchParams(search="python"))

        assert sorted(titles(results)) == ["Data Analyst", "Senior PYTHON Developer"]

    def test_search_wildcards_match_literally(self, db_session, make_job):
        make_job("100% Remote Engineer", days=1)
        make_job("1000 Remote Engineers", days=2)

        results = job_search.search_jobs(db_session, JobSearchParams(search="100%"))

        assert titles(results) == ["100% Remote Engineer"]

    def test_location_substring(self, db_session, make_job):
        make_job("Berlin role", days=1, location="Berlin, Germany")
        make_job("Munich role", days=2, location="Munich, Germany")

        results = job_search.search_jobs(db_session, JobSearchParams(location="berlin"))

        assert titles(results) == ["Berlin role"]

    def test_type_is_exact_match(self, db_session, make_job):
        make_job("FT", days=1, type="full-time")
        make_job("PT", days=2, type="part-time")

        assert titles(job_search.search_jobs(db_session, JobSearchParams(type="part-time"))) == ["PT"]
        assert job_search.search_jobs(db_session, JobSearchParams(type="full")) == []

    def test_experience_level_exact_match(self, db_session, make_job):
        make_job("Junior", days=1, experience_level="entry")
        make_job("Lead", days=2, experience_level="senior")

        results = job_search.search_jobs(db_session, JobSearchParams(experience_level="senior"))

        assert titles(results) == ["Lead"]

    def test_salary_min_excludes_lower_and_null(self, db_session, make_job):
        make_job("High", days=1, salary_min=120000, salary_max=150000)
        make_job("Low", days=2, salary_min=40000, salary_max=60000)
        make_job("Unlisted", days=3)

        results = job_search.search_jobs(db_session, JobSearchParams(salary_min=100000))

        assert titles(results) == ["High"]
        assert all(job.salary_min >= 100000 for job in results)

    def test_salary_max_excludes_higher(self, db_session, make_job):
        make_job("High", days=1, salary_min=120000, salary_max=150000)
        make_job("Low", days=2, salary_min=40000, salary_max=60000)

        results = job_search.search_jobs(db_session, JobSearchParams(salary_max=75000))

        assert titles(results) == ["Low"]

    def test_filters_combine_with_and(self, db_session, make_job):
        make_job("Python Berlin", days=1, location="Berlin")
        make_job("Python Paris", days=2, location="Paris")
        make_job("Go Berlin", days=3, location="Berlin")

        results = job_search.search_jobs(
            db_session, JobSearchParams(search="python", location="berlin")
        )

        assert titles(results) == ["Python Berlin"]

    def test_newest_first(self, db_session, make_job):
        make_job("Oldest", days=1)
        make_job("Newest", days=3)
        make_job("Middle", days=2)

        assert titles(job_search.search_jobs(db_session)) == ["Newest", "Middle", "Oldest"]

    def test_limit_and_offset(self, db_session, make_job):
        for day in range(5):
            make_job(f"Job {day}", days=day)

        first_page = job_search.search_jobs(db_session, JobSearchParams(limit=2))
        second_page = job_search.search_jobs(db_session, JobSearchParams(limit=2, offset=2))
        last_page = job_search.search_jobs(db_session, JobSearchParams(limit=2, offset=4))

        assert titles(first_page) == ["Job 4", "Job 3"]
        assert titles(second_page) == ["Job 2", "Job 1"]
        assert titles(last_page) == ["Job 0"]

    def test_same_timestamp_order_is_stable(self, db_session, make_job):
        for i in range(4):
            make_job(f"Same {i}", days=0)

        first = [job.id for job in job_search.search_jobs(db_session)]
        second = [job.id for job in job_search.search_jobs(db_session)]

        assert first == second
        assert first == sorted(first, reverse=True)

    def test_company_loaded(self, db_session, make_company, make_job):
        company = make_company("Initech")
        make_job("With company", company=company)

        job = job_search.search_jobs(db_session)[0]

        assert job.company is not None
        assert job.company.name == "Initech"

    def test_missing_company_is_none(self, db_session, make_job):
        make_job("Orphan")

        job = job_search.search_jobs(db_session)[0]

        assert job.company is None


class TestFeaturedJobs:

    def test_defaults_to_six_newest_active(self, db_session, make_job):
        for day in range(8):
            make_job(f"Job {day}", days=day)
        make_job("Inactive newest", days=20, is_active=False)

        results = job_search.featured_jobs(db_session)

        assert len(results) == 6
        assert titles(results)[0] == "Job 7"
        assert "Inactive newest" not in titles(results)

    @pytest.mark.parametrize("limit", [1, 3])
    def test_custom_limit(self, db_session, make_job, limit):
        for day in range(4):
            make_job(f"Job {day}", days=day)

        assert len(job_search.featured_jobs(db_session, limit=limit)) == limit
