"""Test factories using factory_boy."""

import factory

from resvn.core.models.command import ExecutionResult
from resvn.core.models.config import Credentials, RunConfig
from resvn.core.models.repository import MatchMode, PatternSet


class RunConfigFactory(factory.Factory):
    """Factory for creating RunConfig instances."""

    class Meta:
        model = RunConfig

    base_url = factory.Sequence(lambda n: f"http://server{n}.example.com:3690")
    url_root = "svn"
    global_args = factory.LazyFunction(list)
    match_mode = MatchMode.ALL
    dry_run = False


class PatternSetFactory(factory.Factory):
    """Factory for creating PatternSet instances."""

    class Meta:
        model = PatternSet

    include = factory.LazyFunction(lambda: ["DAPA"])
    exclude = factory.LazyFunction(list)
    case_insensitive = True


class ExecutionResultFactory(factory.Factory):
    """Factory for creating ExecutionResult instances."""

    class Meta:
        model = ExecutionResult

    stdout = ""
    stderr = ""
    success = True
    returncode = 0

    class Params:
        failed = factory.Trait(
            success=False,
            returncode=1,
            stderr=factory.Faker("sentence"),
        )


class CredentialsFactory(factory.Factory):
    """Factory for creating Credentials instances."""

    class Meta:
        model = Credentials

    username = factory.Faker("user_name")
    password = factory.Faker("password")
    agent_cached = False
