# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine

from suicide_analysis.application.services.password_hashing import BcryptPasswordHasher
from suicide_analysis.application.use_cases.statistics.resources import (
    GetCountryResourcesUseCase,
    ListResourcesUseCase,
)
from suicide_analysis.application.use_cases.statistics.suicides import (
    ListSuicidesUseCase,
    SearchSuicidesUseCase,
)
from suicide_analysis.application.use_cases.statistics.testimonials import (
    AddTestimonialUseCase,
    ListTestimonialsUseCase,
)
from suicide_analysis.application.use_cases.users.get_user_info import GetUserInfoUseCase
from suicide_analysis.application.use_cases.users.login_user import LoginUserUseCase
from suicide_analysis.application.use_cases.users.logout_user import LogoutUserUseCase
from suicide_analysis.application.use_cases.users.signup_user import SignupUserUseCase
from suicide_analysis.application.use_cases.users.update_user import UpdateUserUseCase
from suicide_analysis.infrastructure.audit import AuditLogger
from suicide_analysis.infrastructure.auth import JoseTokenService, SessionCookie
from suicide_analysis.infrastructure.db import SessionFactory, build_engine, build_session_factory
from suicide_analysis.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyResourceRepository,
    SqlAlchemySuicideRepository,
    SqlAlchemyTestimonialRepository,
)
from suicide_analysis.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from suicide_analysis.interfaces.http.controllers.auth_controller import AuthController
from suicide_analysis.interfaces.http.controllers.misc_controller import MiscController
from suicide_analysis.interfaces.http.controllers.resources_controller import ResourcesController
from suicide_analysis.interfaces.http.controllers.statistics_controller import StatisticsController
from suicide_analysis.interfaces.http.controllers.testimonials_controller import (
    TestimonialsController,
)
from suicide_analysis.interfaces.http.controllers.users_controller import UsersController
from suicide_analysis.shared.config import AppConfig
from suicide_analysis.shared.middleware.rate_limit import InMemoryRateLimiter


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> SessionFactory:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.auth.bcrypt_rounds)

    @cached_property
    def token_service(self) -> JoseTokenService:
        return JoseTokenService(
            self.config.secret_key,
            algorithm=self.config.auth.jwt_algorithm,
            ttl=timedelta(hours=self.config.auth.token_ttl_hours),
        )

    @cached_property
    def session_cookie(self) -> SessionCookie:
        return SessionCookie.from_config(self.config.auth, self.config.security)

    @cached_property
    def audit(self) -> AuditLogger:
        return AuditLogger(self.session_factory)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def suicide_repository(self) -> SqlAlchemySuicideRepository:
        return SqlAlchemySuicideRepository(self.session_factory)

    @cached_property
    def resource_repository(self) -> SqlAlchemyResourceRepository:
        return SqlAlchemyResourceRepository(self.session_factory)

    @cached_property
    def testimonial_repository(self) -> SqlAlchemyTestimonialRepository:
        return SqlAlchemyTestimonialRepository(self.session_factory)

    # Auth use cases

    @cached_property
    def signup_user_use_case(self) -> SignupUserUseCase:
        return SignupUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.token_service)

    @cached_property
    def get_user_info_use_case(self) -> GetUserInfoUseCase:
        return GetUserInfoUseCase(users=self.user_repository)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(users=self.user_repository, password_hasher=self.password_hasher)

    # Statistics use cases

    @cached_property
    def list_suicides_use_case(self) -> ListSuicidesUseCase:
        return ListSuicidesUseCase(suicides=self.suicide_repository)

    @cached_property
    def search_suicides_use_case(self) -> SearchSuicidesUseCase:
        return SearchSuicidesUseCase(suicides=self.suicide_repository)

    @cached_property
    def list_resources_use_case(self) -> ListResourcesUseCase:
        return ListResourcesUseCase(resources=self.resource_repository)

    @cached_property
    def country_resources_use_case(self) -> GetCountryResourcesUseCase:
        return GetCountryResourcesUseCase(resources=self.resource_repository)

    @cached_property
    def list_testimonials_use_case(self) -> ListTestimonialsUseCase:
        return ListTestimonialsUseCase(testimonials=self.testimonial_repository)

    @cached_property
    def add_testimonial_use_case(self) -> AddTestimonialUseCase:
        return AddTestimonialUseCase(testimonials=self.testimonial_repository)

    # Rate limiting

    def _limiter(self, limit: int) -> InMemoryRateLimiter | None:
        security = self.config.security
        if not security.enable_rate_limit:
            return None
        return InMemoryRateLimiter(
            limit,
            security.rate_limit_window,
            trust_forwarded=security.trust_proxy_headers,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            signup_use_case=self.signup_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            session_cookie=self.session_cookie,
            audit=self.audit,
            signup_limiter=self._limiter(self.config.security.signup_rate_limit),
            login_limiter=self._limiter(self.config.security.login_rate_limit),
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            get_user_info_use_case=self.get_user_info_use_case,
            update_user_use_case=self.update_user_use_case,
            audit=self.audit,
        )

    @cached_property
    def statistics_controller(self) -> StatisticsController:
        return StatisticsController(
            list_suicides_use_case=self.list_suicides_use_case,
            search_suicides_use_case=self.search_suicides_use_case,
        )

    @cached_property
    def resources_controller(self) -> ResourcesController:
        return ResourcesController(
            list_resources_use_case=self.list_resources_use_case,
            country_resources_use_case=self.country_resources_use_case,
        )

    @cached_property
    def testimonials_controller(self) -> TestimonialsController:
        return TestimonialsController(
            list_testimonials_use_case=self.list_testimonials_use_case,
            add_testimonial_use_case=self.add_testimonial_use_case,
            audit=self.audit,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
