"""Multi-stage Dockerfile template for musl builds.

Rendered with Jinja2. The template receives two variables:

- ``path``: project directory inside the build context
- ``bin``: name of the binary to compile

The ``builder`` stage must leave the packaged artifact at
``/opt/app/bootstrap.zip``; the ``runner`` stage serves the binary on port
8080 behind the function runtime emulator.
"""

MUSL_DOCKERFILE = """FROM rust:1-alpine AS builder

# musl toolchain and zip for packaging
RUN apk add --no-cache musl-dev zip

WORKDIR /usr/src/app
ENV CARGO_TARGET_DIR=/usr/src/target

# Copy the whole build context, the project may be a workspace member
COPY . .

# Build a statically linked release binary
RUN cd {{ path }} && \\
    cargo build --release --target x86_64-unknown-linux-musl --bin {{ bin }} && \\
    mkdir -p /opt/app && \\
    cp $CARGO_TARGET_DIR/x86_64-unknown-linux-musl/release/{{ bin }} /opt/app/bootstrap

# Package the binary the way the provided runtime expects it
RUN zip -j /opt/app/bootstrap.zip /opt/app/bootstrap


FROM public.ecr.aws/lambda/provided:al2023 AS runner

# The runtime interface emulator listens on 8080
COPY --from=builder /opt/app/bootstrap ${LAMBDA_RUNTIME_DIR}/bootstrap

CMD ["{{ bin }}"]
"""
