"""Dependency replacement mappings and framework ownership tables."""

from stackshift.models.rules import DependencyMapping, PackageInfo

DEPENDENCY_MAPPINGS: list[DependencyMapping] = [
    # React ecosystem
    DependencyMapping(
        source=PackageInfo(name="react-scripts", framework="react"),
        replacements=[
            PackageInfo(name="@vitejs/plugin-react", framework="react"),
            PackageInfo(name="vite", framework="agnostic"),
        ],
        notes="Migrate from Create React App to Vite for better performance",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="enzyme", framework="react"),
        replacements=[
            PackageInfo(name="@testing-library/react", framework="react"),
            PackageInfo(name="@testing-library/jest-dom", framework="react"),
        ],
        notes="Enzyme is deprecated for React 18+, use React Testing Library",
        breaking_changes=["Different API for component testing", "No shallow rendering"],
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="react-router", version_range="<6", framework="react"),
        replacements=[PackageInfo(name="react-router-dom", version_range="^6", framework="react")],
        notes="React Router v6 has significant API changes",
        breaking_changes=["Switch replaced with Routes", "Route component API changed"],
        compatible=False,
    ),
    # Vue ecosystem
    DependencyMapping(
        source=PackageInfo(name="vue-cli-service", framework="vue"),
        replacements=[
            PackageInfo(name="@vitejs/plugin-vue", framework="vue"),
            PackageInfo(name="vite", framework="agnostic"),
        ],
        notes="Vue CLI is in maintenance mode, migrate to Vite",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="vuex", version_range="<4", framework="vue"),
        replacements=[PackageInfo(name="pinia", framework="vue")],
        notes="Pinia is the recommended state management for Vue 3",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="vue-router", version_range="<4", framework="vue"),
        replacements=[PackageInfo(name="vue-router", version_range="^4", framework="vue")],
        notes="Vue Router 4 required for Vue 3",
        breaking_changes=["Different route configuration", "Composition API support"],
        compatible=False,
    ),
    # Angular to React
    DependencyMapping(
        source=PackageInfo(name="@angular/common", framework="angular"),
        replacements=[PackageInfo(name="react", framework="react")],
        notes="Core framework change from Angular to React",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="@angular/router", framework="angular"),
        replacements=[PackageInfo(name="react-router-dom", framework="react")],
        notes="Replace Angular Router with React Router",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="@angular/forms", framework="angular"),
        replacements=[
            PackageInfo(name="react-hook-form", framework="react"),
            PackageInfo(name="formik", framework="react"),
        ],
        notes="Form handling libraries for React",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="@angular/http", framework="angular"),
        replacements=[
            PackageInfo(name="axios", framework="agnostic"),
            PackageInfo(name="swr", framework="react"),
            PackageInfo(name="@tanstack/react-query", framework="react"),
        ],
        notes="HTTP client alternatives for React",
        compatible=False,
    ),
    # Express
    DependencyMapping(
        source=PackageInfo(name="express", framework="express"),
        replacements=[
            PackageInfo(name="fastify", framework="fastify"),
            PackageInfo(name="@nestjs/core", framework="nestjs"),
            PackageInfo(name="koa", framework="koa"),
        ],
        notes="Modern alternatives to Express with better performance",
        compatible=True,
    ),
    DependencyMapping(
        source=PackageInfo(name="body-parser", framework="express"),
        notes="Built into Express 4.16+ and not needed in modern frameworks",
        compatible=True,
    ),
    # Build tools
    DependencyMapping(
        source=PackageInfo(name="webpack", version_range="<5"),
        replacements=[
            PackageInfo(name="webpack", version_range="^5"),
            PackageInfo(name="vite", framework="agnostic"),
            PackageInfo(name="esbuild", framework="agnostic"),
        ],
        notes="Modern build tools with better performance",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="gulp"),
        replacements=[
            PackageInfo(name="vite", framework="agnostic"),
            PackageInfo(name="webpack", version_range="^5"),
        ],
        notes="Gulp is less commonly used, modern bundlers handle asset pipeline",
        compatible=True,
    ),
    # Testing
    DependencyMapping(
        source=PackageInfo(name="mocha"),
        replacements=[
            PackageInfo(name="vitest", framework="agnostic"),
            PackageInfo(name="jest", framework="agnostic"),
        ],
        notes="Modern testing frameworks with better DX",
        compatible=True,
    ),
    DependencyMapping(
        source=PackageInfo(name="karma"),
        replacements=[
            PackageInfo(name="vitest", framework="agnostic"),
            PackageInfo(name="@playwright/test", framework="agnostic"),
        ],
        notes="Karma is deprecated, use modern test runners",
        compatible=False,
    ),
    # Styling
    DependencyMapping(
        source=PackageInfo(name="node-sass"),
        replacements=[PackageInfo(name="sass")],
        notes="node-sass is deprecated, use Dart Sass",
        compatible=False,
    ),
    DependencyMapping(
        source=PackageInfo(name="styled-components", version_range="<5", framework="react"),
        replacements=[
            PackageInfo(name="styled-components", version_range="^5", framework="react"),
            PackageInfo(name="@emotion/styled", framework="react"),
        ],
        notes="Update to v5 or consider Emotion for better performance",
        compatible=False,
    ),
    # State management
    DependencyMapping(
        source=PackageInfo(name="redux", framework="react"),
        replacements=[
            PackageInfo(name="@reduxjs/toolkit", framework="react"),
            PackageInfo(name="zustand", framework="react"),
            PackageInfo(name="jotai", framework="react"),
        ],
        notes="Modern state management alternatives",
        compatible=True,
    ),
    # Utilities
    DependencyMapping(
        source=PackageInfo(name="moment"),
        replacements=[
            PackageInfo(name="date-fns"),
            PackageInfo(name="dayjs"),
            PackageInfo(name="luxon"),
        ],
        notes="Moment.js is in maintenance mode, use modern alternatives",
        compatible=True,
    ),
    DependencyMapping(
        source=PackageInfo(name="lodash"),
        replacements=[PackageInfo(name="lodash-es"), PackageInfo(name="ramda")],
        notes="Consider ES modules version or functional alternatives",
        compatible=True,
    ),
]

# Package name prefixes owned by each framework. A package matching one of
# its source framework's prefixes cannot survive a change of framework.
FRAMEWORK_PREFIXES: dict[str, list[str]] = {
    "react": ["react", "@testing-library/react", "react-dom", "react-router"],
    "vue": ["vue", "@vue/", "vuex", "vue-router", "pinia"],
    "angular": ["@angular/", "@ngrx/"],
    "svelte": ["svelte", "@sveltejs/"],
    "express": ["express-", "body-parser", "multer"],
    "nestjs": ["@nestjs/"],
    "nextjs": ["next"],
    "next.js": ["next"],
}

REPLACEMENT_NOTES: dict[str, str] = {
    "enzyme:@testing-library/react": "Different testing philosophy - no shallow rendering",
    "moment:date-fns": "Tree-shakeable, functional API",
    "moment:dayjs": "Similar API to Moment.js, smaller bundle",
    "node-sass:sass": "Direct replacement, may need to update import syntax",
    "react-scripts:vite": "Complete build tool migration, significant config changes",
}
