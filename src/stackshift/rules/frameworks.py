"""Framework detection patterns."""

from stackshift.models.rules import ContentPattern, FrameworkPattern, VariantPattern

JS_SOURCES = "**/*.{js,jsx,ts,tsx}"
JS_OR_TS = "**/*.{js,ts}"

FRAMEWORK_PATTERNS: list[FrameworkPattern] = [
    FrameworkPattern(
        framework="react",
        files=["package.json"],
        dependencies=["react", "react-dom"],
        content=[
            ContentPattern(file=JS_SOURCES, pattern=r"from ['\"]react['\"]", weight=10),
            ContentPattern(file=JS_SOURCES, pattern=r"React\.Component", weight=5),
        ],
        structure=["src"],
        priority=100,
        variants=[
            VariantPattern(
                name="next.js",
                dependencies=["next"],
                files=["next.config.js", "next.config.mjs", "next.config.ts"],
            ),
            VariantPattern(name="gatsby", dependencies=["gatsby"], files=["gatsby-config.js"]),
            VariantPattern(
                name="create-react-app",
                files=["public/index.html"],
                dev_dependencies=["react-scripts"],
            ),
        ],
    ),
    FrameworkPattern(
        framework="vue",
        files=["package.json"],
        dependencies=["vue"],
        content=[
            ContentPattern(file="**/*.vue", pattern=r"<template>", weight=20),
            ContentPattern(file=JS_OR_TS, pattern=r"from ['\"]vue['\"]", weight=10),
            ContentPattern(file=JS_OR_TS, pattern=r"createApp|Vue\.component", weight=15),
        ],
        priority=95,
        variants=[
            VariantPattern(
                name="nuxt", dependencies=["nuxt"], files=["nuxt.config.js", "nuxt.config.ts"]
            ),
            VariantPattern(name="vue-cli", files=["vue.config.js"]),
            VariantPattern(
                name="vite-vue",
                dev_dependencies=["@vitejs/plugin-vue"],
                files=["vite.config.js", "vite.config.ts"],
            ),
        ],
    ),
    FrameworkPattern(
        framework="angular",
        files=["angular.json", "package.json"],
        dependencies=["@angular/core", "@angular/common"],
        content=[
            ContentPattern(file="**/*.ts", pattern=r"@Component\(\{", weight=20),
            ContentPattern(file="**/*.ts", pattern=r"from ['\"]@angular", weight=10),
        ],
        structure=["src/app"],
        priority=90,
    ),
    FrameworkPattern(
        framework="nestjs",
        files=["package.json", "nest-cli.json"],
        dependencies=["@nestjs/core", "@nestjs/common"],
        content=[
            ContentPattern(file="**/*.ts", pattern=r"@Module\(\{", weight=20),
            ContentPattern(file="**/*.ts", pattern=r"@Controller\(", weight=15),
            ContentPattern(file="**/*.ts", pattern=r"from ['\"]@nestjs", weight=10),
        ],
        priority=85,
    ),
    FrameworkPattern(
        framework="django",
        files=["manage.py", "requirements.txt"],
        content=[
            ContentPattern(file="manage.py", pattern=r"django", weight=30),
            ContentPattern(file="requirements.txt", pattern=r"(?i)django", weight=20),
            ContentPattern(file="**/*.py", pattern=r"from django", weight=10),
            ContentPattern(file="**/settings.py", pattern=r"INSTALLED_APPS", weight=15),
        ],
        structure=["apps", "templates"],
        priority=85,
    ),
    FrameworkPattern(
        framework="rails",
        files=["Gemfile", "config/routes.rb"],
        content=[
            ContentPattern(file="Gemfile", pattern=r"gem ['\"]rails['\"]", weight=30),
            ContentPattern(
                file="config/routes.rb", pattern=r"Rails\.application\.routes", weight=20
            ),
        ],
        structure=["app/controllers", "app/models", "app/views"],
        priority=85,
    ),
    FrameworkPattern(
        framework="express",
        files=["package.json"],
        dependencies=["express"],
        content=[
            ContentPattern(file=JS_OR_TS, pattern=r"require\(['\"]express['\"]\)", weight=15),
            ContentPattern(file=JS_OR_TS, pattern=r"from ['\"]express['\"]", weight=15),
            ContentPattern(file=JS_OR_TS, pattern=r"app\.(get|post|put|delete|use)\(", weight=10),
        ],
        priority=80,
    ),
    FrameworkPattern(
        framework="laravel",
        files=["composer.json", "artisan"],
        content=[
            ContentPattern(file="composer.json", pattern=r"\"laravel/framework\"", weight=30),
            ContentPattern(file="artisan", pattern=r"Laravel", weight=20),
        ],
        structure=["app/Http/Controllers", "resources/views"],
        priority=80,
    ),
    FrameworkPattern(
        framework="spring-boot",
        files=["pom.xml", "build.gradle"],
        content=[
            ContentPattern(file="pom.xml", pattern=r"spring-boot-starter", weight=30),
            ContentPattern(file="build.gradle", pattern=r"org\.springframework\.boot", weight=30),
            ContentPattern(file="**/*.java", pattern=r"@SpringBootApplication", weight=25),
            ContentPattern(file="**/*.java", pattern=r"@RestController", weight=15),
        ],
        structure=["src/main/java", "src/main/resources"],
        priority=80,
    ),
    FrameworkPattern(
        framework="fastapi",
        files=["requirements.txt", "pyproject.toml"],
        content=[
            ContentPattern(file="requirements.txt", pattern=r"(?i)fastapi", weight=25),
            ContentPattern(file="pyproject.toml", pattern=r"fastapi", weight=25),
            ContentPattern(file="**/*.py", pattern=r"from fastapi import", weight=20),
            ContentPattern(file="**/*.py", pattern=r"FastAPI\(\)", weight=15),
        ],
        priority=75,
    ),
    FrameworkPattern(
        framework="flask",
        files=["requirements.txt", "pyproject.toml"],
        content=[
            ContentPattern(file="requirements.txt", pattern=r"(?im)^flask\b", weight=25),
            ContentPattern(file="pyproject.toml", pattern=r"(?i)\bflask\b", weight=25),
            ContentPattern(file="**/*.py", pattern=r"from flask import", weight=20),
            ContentPattern(file="**/*.py", pattern=r"Flask\(__name__\)", weight=15),
        ],
        priority=70,
    ),
]
