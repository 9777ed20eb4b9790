"""Known breaking changes per framework migration path."""

from stackshift.models.migration import BreakingChange, ChangeCategory, Effort, Severity
from stackshift.models.rules import BreakingChangeRule, FrameworkVersion

BREAKING_CHANGE_RULES: list[BreakingChangeRule] = [
    BreakingChangeRule(
        source=FrameworkVersion(framework="react", min_version="17.0.0", max_version="17.9.9"),
        target=FrameworkVersion(framework="react", min_version="18.0.0"),
        changes=[
            BreakingChange(
                id="react-18-root-api",
                category=ChangeCategory.API,
                severity=Severity.HIGH,
                description="ReactDOM.render is deprecated. Use createRoot instead.",
                search_pattern=r"ReactDOM\.render\(",
                replacement='ReactDOM.createRoot(document.getElementById("root")).render(',
                migration_guide="https://react.dev/blog/2022/03/08/react-18-upgrade-guide",
                automatable=True,
                effort=Effort.SMALL,
            ),
            BreakingChange(
                id="react-18-automatic-batching",
                category=ChangeCategory.BEHAVIOR,
                severity=Severity.MEDIUM,
                description="Automatic batching may change component update behavior",
                migration_guide="Review setState calls in event handlers and effects",
                effort=Effort.MEDIUM,
            ),
            BreakingChange(
                id="react-18-strict-mode",
                category=ChangeCategory.BEHAVIOR,
                severity=Severity.LOW,
                description="StrictMode now remounts components to test resilience",
                effort=Effort.SMALL,
            ),
        ],
    ),
    BreakingChangeRule(
        source=FrameworkVersion(framework="vue", min_version="2.0.0", max_version="2.9.9"),
        target=FrameworkVersion(framework="vue", min_version="3.0.0"),
        changes=[
            BreakingChange(
                id="vue-3-global-api",
                category=ChangeCategory.API,
                severity=Severity.CRITICAL,
                description=(
                    "Global API changes: Vue.component, Vue.directive, etc. moved to app instance"
                ),
                search_pattern=r"Vue\.(component|directive|mixin|use)\(",
                replacement=r"app.\1(",
                migration_guide="https://v3-migration.vuejs.org/breaking-changes/global-api.html",
                automatable=True,
                effort=Effort.MEDIUM,
            ),
            BreakingChange(
                id="vue-3-filters",
                category=ChangeCategory.SYNTAX,
                severity=Severity.HIGH,
                description="Filters have been removed in Vue 3",
                search_pattern=r"\{\{[^}]+\|[^}]+\}\}",
                migration_guide="Replace with methods or computed properties",
                effort=Effort.LARGE,
            ),
            BreakingChange(
                id="vue-3-v-model",
                category=ChangeCategory.SYNTAX,
                severity=Severity.HIGH,
                description="v-model API has changed for custom components",
                search_pattern=r"v-model(?!:)",
                migration_guide="Update to use modelValue prop and update:modelValue event",
                effort=Effort.MEDIUM,
            ),
            BreakingChange(
                id="vue-3-lifecycle",
                category=ChangeCategory.API,
                severity=Severity.MEDIUM,
                description=(
                    "Lifecycle hooks renamed: beforeDestroy -> beforeUnmount, "
                    "destroyed -> unmounted"
                ),
                search_pattern=r"(beforeDestroy|destroyed)",
                automatable=True,
                effort=Effort.TRIVIAL,
            ),
        ],
    ),
    BreakingChangeRule(
        source=FrameworkVersion(framework="angular"),
        target=FrameworkVersion(framework="react"),
        changes=[
            BreakingChange(
                id="angular-to-react-components",
                category=ChangeCategory.STRUCTURE,
                severity=Severity.CRITICAL,
                description="Angular components need to be rewritten as React components",
                search_pattern=r"@Component\(\{",
                migration_guide="Convert Angular components to React functional components",
                effort=Effort.LARGE,
            ),
            BreakingChange(
                id="angular-to-react-services",
                category=ChangeCategory.STRUCTURE,
                severity=Severity.HIGH,
                description=(
                    "Angular services need to be converted to React patterns (hooks, context)"
                ),
                search_pattern=r"@Injectable\(\{",
                migration_guide="Convert services to custom hooks or context providers",
                effort=Effort.LARGE,
            ),
            BreakingChange(
                id="angular-to-react-routing",
                category=ChangeCategory.DEPENDENCY,
                severity=Severity.HIGH,
                description="Angular Router needs to be replaced with React Router",
                search_pattern=r"RouterModule|router-outlet",
                migration_guide="Implement React Router with Routes and Route components",
                effort=Effort.LARGE,
            ),
        ],
    ),
    BreakingChangeRule(
        source=FrameworkVersion(framework="express"),
        target=FrameworkVersion(framework="fastify"),
        changes=[
            BreakingChange(
                id="express-to-fastify-middleware",
                category=ChangeCategory.API,
                severity=Severity.HIGH,
                description="Express middleware not directly compatible with Fastify",
                search_pattern=r"app\.use\(",
                migration_guide="Use fastify-express or rewrite middleware as Fastify plugins",
                effort=Effort.MEDIUM,
            ),
            BreakingChange(
                id="express-to-fastify-routing",
                category=ChangeCategory.SYNTAX,
                severity=Severity.MEDIUM,
                description="Route definition syntax differs between Express and Fastify",
                search_pattern=r"app\.(get|post|put|delete)\(",
                replacement=r"fastify.\1(",
                automatable=True,
                effort=Effort.SMALL,
            ),
            BreakingChange(
                id="express-to-fastify-error-handling",
                category=ChangeCategory.API,
                severity=Severity.MEDIUM,
                description="Error handling patterns differ between frameworks",
                search_pattern=r"app\.use\(\s*\(\s*err",
                migration_guide="Use Fastify error handlers and hooks",
                effort=Effort.MEDIUM,
            ),
        ],
    ),
    BreakingChangeRule(
        source=FrameworkVersion(framework="next.js", max_version="12.9.9"),
        target=FrameworkVersion(framework="next.js", min_version="13.0.0"),
        changes=[
            BreakingChange(
                id="nextjs-app-router",
                category=ChangeCategory.STRUCTURE,
                severity=Severity.CRITICAL,
                description="Pages Router to App Router migration requires restructuring",
                search_pattern=r"pages/",
                migration_guide="Move pages to app directory with new file conventions",
                effort=Effort.LARGE,
            ),
            BreakingChange(
                id="nextjs-data-fetching",
                category=ChangeCategory.API,
                severity=Severity.HIGH,
                description="getServerSideProps/getStaticProps replaced with async components",
                search_pattern=r"(getServerSideProps|getStaticProps|getStaticPaths)",
                migration_guide="Use async/await in Server Components",
                effort=Effort.LARGE,
            ),
            BreakingChange(
                id="nextjs-layouts",
                category=ChangeCategory.STRUCTURE,
                severity=Severity.MEDIUM,
                description="_app.js and _document.js replaced with layout.js and RootLayout",
                search_pattern=r"(_app|_document)\.(js|tsx)",
                migration_guide="Create layout.js files in app directory",
                effort=Effort.MEDIUM,
            ),
        ],
    ),
    BreakingChangeRule(
        source=FrameworkVersion(framework="django", min_version="3.0", max_version="3.9"),
        target=FrameworkVersion(framework="django", min_version="4.0"),
        changes=[
            BreakingChange(
                id="django-4-csrf",
                category=ChangeCategory.CONFIG,
                severity=Severity.HIGH,
                description="CSRF_TRUSTED_ORIGINS now requires scheme",
                search_pattern=r"CSRF_TRUSTED_ORIGINS",
                migration_guide="Add https:// or http:// to all origins",
                automatable=True,
                effort=Effort.TRIVIAL,
            ),
            BreakingChange(
                id="django-4-timezone",
                category=ChangeCategory.BEHAVIOR,
                severity=Severity.MEDIUM,
                description="USE_L10N setting deprecated, localization now always enabled",
                search_pattern=r"USE_L10N",
                migration_guide="Remove USE_L10N from settings",
                automatable=True,
                effort=Effort.TRIVIAL,
            ),
            BreakingChange(
                id="django-4-models",
                category=ChangeCategory.API,
                severity=Severity.LOW,
                description="NullBooleanField deprecated in favor of BooleanField(null=True)",
                search_pattern=r"NullBooleanField",
                replacement="BooleanField(null=True)",
                automatable=True,
                effort=Effort.SMALL,
            ),
        ],
    ),
]
