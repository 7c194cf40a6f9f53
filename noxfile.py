import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

CONTEXTS = ["auth", "catalogue", "cart", "ordering", "payments", "notifications", "seller_dashboard"]

# Packages with C extensions that must be rebuilt per Python version.
# Poetry's wheel cache can serve a .so compiled for the wrong interpreter.
_C_EXT_PACKAGES = ["psycopg2-binary"]


def _install(session: nox.Session) -> None:
    """Install the project with the test extra into the nox virtualenv."""
    session.run("poetry", "install", "--all-extras", external=True)
    session.run("pip", "install", "--force-reinstall", "--no-cache-dir", *_C_EXT_PACKAGES)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no infrastructure required)."""
    _install(session)
    session.run("pytest", *(f"tests/{context}/domain/" for context in CONTEXTS if context != "seller_dashboard"))


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_context(session: nox.Session) -> None:
    """Run one bounded context's tests: `nox -s tests_context -- ordering`."""
    _install(session)
    context = session.posargs[0] if session.posargs else "auth"
    if context not in CONTEXTS and context != "shared":
        session.error(f"Unknown context: {context}")
    session.run("pytest", f"tests/{context}/")


@nox.session(python=PYTHON_VERSIONS[-1])
def loadtest(session: nox.Session) -> None:
    """Headless Locust run against a running server (LOCUST_HOST, default localhost:8000)."""
    _install(session)
    session.run(
        "locust",
        "-f",
        "loadtests/locustfile.py",
        "--headless",
        "--users",
        "20",
        "--spawn-rate",
        "5",
        "--run-time",
        "1m",
        "--host",
        session.env.get("LOCUST_HOST", "http://localhost:8000"),
    )
